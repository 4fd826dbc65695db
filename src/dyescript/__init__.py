"""DyeScript - a small authoring language that compiles to CSS."""

import logging

__version__ = "0.3.0"

logging.getLogger("dyescript").addHandler(logging.NullHandler())

from dyescript.compiler import CompileResult, compile_source, compile_statements  # noqa: E402
from dyescript.config import CompilerConfig  # noqa: E402

__all__ = [
    "__version__",
    "CompileResult",
    "CompilerConfig",
    "compile_source",
    "compile_statements",
]
