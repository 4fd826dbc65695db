from dyescript.interpreter.interpreter import DyeInterpreter
from dyescript.interpreter.kinds import StatementKind

__all__ = ["DyeInterpreter", "StatementKind"]
