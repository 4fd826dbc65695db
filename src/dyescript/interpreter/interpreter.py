"""Statement interpreter: evaluates variables and applies each statement to the store."""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable

from dyescript.errors import (
    DyeSyntaxError,
    InvalidVariableNameError,
    NotSupportedError,
    UnknownStatementError,
    UnresolvedVariableError,
)
from dyescript.interpreter.kinds import StatementKind
from dyescript.model.statement import ParsedSource
from dyescript.runtime import DyeRuntime
from dyescript.store.collection import CollectionType
from dyescript.store.scope import DyeScopeWrapper
from dyescript.store.store import Store
from dyescript.text import to_camel_case
from dyescript.validation import VariableNameValidator

logger = logging.getLogger("dyescript")

COMPONENT = "DyeInterpreter"

# A leading reference; whatever follows the name is kept as a literal suffix.
_VARIABLE_RE = re.compile(r"&([a-zA-Z][a-zA-Z0-9/]*)(.*)", re.DOTALL)
_CLASS_QUERY_RE = re.compile(r"\$[a-zA-Z][a-zA-Z0-9-]*")

Handler = Callable[[list[str], int], None]


class DyeInterpreter:
    """Runs parsed statements against a :class:`Store`, one at a time.

    A statement that fails is logged through the runtime logger with its
    source index and skipped; the rest of the source still compiles.
    """

    def __init__(self, store: Store, runtime: DyeRuntime | None = None) -> None:
        self.store = store
        self.runtime = runtime or DyeRuntime()
        self.scope = DyeScopeWrapper(store.scope_manager.get_active_scope(), store)
        self._validator = VariableNameValidator()
        self._handlers: dict[StatementKind, Handler] = {
            StatementKind.VAR: self._define_variables,
            StatementKind.DEFAULT: self._define_default_variables,
            StatementKind.SCOPE: self._define_scope,
            StatementKind.STYLE: self._define_style,
            StatementKind.CLASS: self._define_style,
            StatementKind.IMPORT: self._import_module,
            StatementKind.EXPOSE: self._expose_to_module,
            StatementKind.EXPORT: self._export_to_invoker,
            StatementKind.TYPE: self._set_type,
            StatementKind.DYEGEST: self._enable_dyegest_mode,
            StatementKind.VERSION: self._check_support,
        }

    # --- public API -----------------------------------------------------------

    def evaluate(self, token: str) -> str:
        """Resolve a token starting with ``&name``; anything else passes through.

        ``&gap!important`` resolves ``gap`` and keeps ``!important``.  An
        unresolved reference leaves the whole token untouched.
        """
        match = _VARIABLE_RE.match(token)
        if match is None:
            return token
        name, suffix = match.groups()
        value = self.scope.get(name)
        if value is not None:
            return value + suffix
        if self.runtime.strict:
            raise UnresolvedVariableError(name)
        return token

    def interpret(self, statement: ParsedSource) -> None:
        try:
            self._interpret(statement)
        except Exception as exc:
            self.runtime.logger.error(str(exc), COMPONENT, self.runtime.file, statement.index)

    def process(self, statements: Iterable[ParsedSource]) -> Store:
        for statement in statements:
            self.interpret(statement)
        return self.store

    # --- dispatch -------------------------------------------------------------

    def _interpret(self, statement: ParsedSource) -> None:
        if not statement.content:
            return
        query, *queue = [self.evaluate(token) for token in statement.content]

        if _CLASS_QUERY_RE.fullmatch(query):
            self._apply_class(query, queue)
            return

        kind = StatementKind.from_token(query)
        if kind is None:
            if self.runtime.strict:
                raise UnknownStatementError(query)
            logger.debug("Ignoring unknown statement %r at line %s", query, statement.index)
            return
        self._handlers[kind](queue, statement.index)

    # --- variables ------------------------------------------------------------

    def _define_variables(self, queue: list[str], index: int) -> None:
        pairs = _pairs(queue, "var")
        for name, _ in pairs:
            if not self._validator.is_valid(name):
                raise InvalidVariableNameError(name, index=index)
        for name, value in pairs:
            self.scope.set(name, value)

    def _define_default_variables(self, queue: list[str], index: int) -> None:
        for name, value in _pairs(queue, "default"):
            self.scope.set_default(name, value)

    # --- scopes ---------------------------------------------------------------

    def _define_scope(self, queue: list[str], index: int) -> None:
        if not queue:
            raise DyeSyntaxError("scope statement needs a collection name", index=index)
        self.scope.update(self.store.activate_collection(queue[0]))
        self.store.scope_manager.load_collections(queue[1:])

    def _set_type(self, queue: list[str], index: int) -> None:
        type_name = queue[0] if queue else CollectionType.IMPLICIT.value
        self.scope.set_type(type_name)
        if CollectionType.from_name(type_name) is None:
            self.runtime.logger.warning(
                f"Unknown scope type {type_name!r}; styles in this scope are written as implicit",
                COMPONENT,
                self.runtime.file,
                index,
            )

    # --- styles ---------------------------------------------------------------

    def _define_style(self, queue: list[str], index: int) -> None:
        if not queue:
            raise DyeSyntaxError("style statement needs a selector", index=index)
        selectors = [s.strip() for s in queue[0].split(",") if s.strip()]
        if not selectors:
            raise DyeSyntaxError(f"Invalid selector list: {queue[0]!r}", index=index)

        declarations: list[tuple[str, str]] = []
        for i in range(1, len(queue), 2):
            if i + 1 >= len(queue):
                raise DyeSyntaxError(f"Property {queue[i]!r} has no value", index=index)
            value = queue[i + 1]
            for prop in queue[i].split(","):
                if prop.strip():
                    declarations.append((to_camel_case(prop.strip()), value))

        for prop, value in declarations:
            self._write(selectors, prop, value)

    def _write(self, selectors: list[str], prop: str, value: str) -> None:
        """Route one declaration by the active collection's type."""
        scope_type = self.scope.type
        if scope_type is CollectionType.ANIMATION:
            for label in selectors:
                self.store.add_keyframe(self.scope.collection.name, label, prop, value)
        elif scope_type is CollectionType.MOTION:
            for label in selectors:
                self.store.add_motion(self.scope.collection.name, label, prop, value)
        elif scope_type is CollectionType.FONT:
            for family in selectors:
                if prop == "src":
                    self.store.add_font(family, value)
                else:
                    self.store.add_font_descriptor(family, prop, value)
        else:
            self.store.add_style(selectors, prop, value)

    def _apply_class(self, query: str, targets: list[str]) -> None:
        class_name = query[1:]
        for target in targets:
            if _CLASS_QUERY_RE.fullmatch(target):
                self.scope.extend_class(target[1:], class_name)
            else:
                self.scope.apply_class(target, class_name)

    # --- modules --------------------------------------------------------------

    def _import_module(self, queue: list[str], index: int) -> None:
        raise NotSupportedError("import", index=index)

    def _expose_to_module(self, queue: list[str], index: int) -> None:
        raise NotSupportedError("expose", index=index)

    def _export_to_invoker(self, queue: list[str], index: int) -> None:
        raise NotSupportedError("export", index=index)

    # --- runtime directives ---------------------------------------------------

    def _enable_dyegest_mode(self, queue: list[str], index: int) -> None:
        self.runtime.enable_strict_mode()
        self.runtime.enable_dyegest_mode()
        self.runtime.logger.info("Dyegest mode enabled (strict)", COMPONENT, self.runtime.file, index)

    def _check_support(self, queue: list[str], index: int) -> None:
        version = queue[0] if queue else None
        if version != self.runtime.version:
            self.runtime.logger.warning(
                f"This file was digested by a different version of DyeScript ({version}). "
                f"It may not work as expected; digest the source again with DyeScript {self.runtime.version}.",
                COMPONENT,
                self.runtime.file,
                index,
            )


def _pairs(queue: list[str], keyword: str) -> list[tuple[str, str]]:
    if len(queue) % 2:
        raise DyeSyntaxError(f"{keyword} statement has a name without a value: {queue[-1]!r}")
    return [(queue[i], queue[i + 1]) for i in range(0, len(queue), 2)]
