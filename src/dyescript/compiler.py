"""One-call compilation: source text -> statements -> store -> CSS."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from dyescript.builder import CSSBuilder, MinCSSBuilder
from dyescript.config import CompilerConfig
from dyescript.interpreter import DyeInterpreter
from dyescript.model.diagnostic import Diagnostic
from dyescript.model.statement import ParsedSource
from dyescript.parser import parse_source
from dyescript.runtime import DyeRuntime
from dyescript.store.store import Store


@dataclass
class CompileResult:
    """The rendered stylesheet plus everything needed to explain it."""

    css: str
    store: Store
    runtime: DyeRuntime
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not any(d.is_error for d in self.diagnostics)


def interpret(
    statements: Iterable[ParsedSource], config: CompilerConfig | None = None
) -> tuple[Store, DyeRuntime]:
    """Run *statements* through a fresh store and runtime."""
    config = config or CompilerConfig()
    runtime = DyeRuntime(strict=config.strict, file=config.source_name)
    store = DyeInterpreter(Store(), runtime).process(statements)
    return store, runtime


def compile_statements(
    statements: Iterable[ParsedSource], config: CompilerConfig | None = None
) -> CompileResult:
    config = config or CompilerConfig()
    store, runtime = interpret(statements, config)
    builder = MinCSSBuilder() if config.minify else CSSBuilder()
    return CompileResult(
        css=builder.build(store),
        store=store,
        runtime=runtime,
        diagnostics=list(runtime.logger.diagnostics),
    )


def compile_source(source: str, config: CompilerConfig | None = None) -> CompileResult:
    """Compile DyeScript *source* to CSS.

    Raises :class:`~dyescript.parser.ParseError` if the text cannot be
    tokenized; statement-level problems are reported as diagnostics instead.
    """
    return compile_statements(parse_source(source), config)
