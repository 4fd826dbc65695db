"""Active scope, the manager that owns collections, and the interpreter-facing wrapper."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator

from dyescript.store.collection import Collection, CollectionType

if TYPE_CHECKING:
    from dyescript.store.store import Store

logger = logging.getLogger("dyescript")

ROOT_COLLECTION = "root"


class Scope:
    """One active collection plus the collections loaded beneath it.

    The root collection, when given, is the last ancestor of every chain.

    Lookup order for :meth:`get`:
        1. active collection, explicit value
        2. loaded collections, explicit value (load order)
        3. root collection, explicit value
        4. the same chain again for defaults
    """

    def __init__(self, collection: Collection, root: Collection | None = None) -> None:
        self.collection = collection
        self.root = root
        self.loaded: list[Collection] = []

    def chain(self) -> Iterator[Collection]:
        yield self.collection
        yield from self.loaded
        if self.root is not None and self.root is not self.collection and self.root not in self.loaded:
            yield self.root

    def get(self, name: str) -> str | None:
        for collection in self.chain():
            value = collection.explicit(name)
            if value is not None:
                return value
        for collection in self.chain():
            value = collection.default(name)
            if value is not None:
                return value
        return None

    def load(self, collection: Collection) -> None:
        if collection is self.collection or collection in self.loaded:
            return
        self.loaded.append(collection)

    def __repr__(self) -> str:
        loaded = [c.name for c in self.loaded]
        return f"Scope(collection={self.collection.name!r}, loaded={loaded})"


class ScopeManager:
    """Owns every named collection and the single active scope."""

    def __init__(self) -> None:
        self.collections: dict[str, Collection] = {}
        root = self.collection(ROOT_COLLECTION)
        self._active = Scope(root, root=root)

    def collection(self, name: str) -> Collection:
        """Return the named collection, creating it if absent."""
        existing = self.collections.get(name)
        if existing is None:
            existing = Collection(name=name)
            self.collections[name] = existing
        return existing

    def get_active_scope(self) -> Scope:
        return self._active

    def activate(self, collection: Collection) -> None:
        """Make *collection* the active scope's backing collection, dropping loaded ones."""
        self._active.collection = collection
        self._active.loaded = []

    def load_collections(self, names: Iterable[str]) -> None:
        """Append the named collections to the active scope's lookup chain."""
        for name in names:
            self._active.load(self.collection(name))


class DyeScopeWrapper:
    """The interpreter's view of the store: variables, scope type, class composition."""

    def __init__(self, scope: Scope, store: Store) -> None:
        self._scope = scope
        self._store = store

    @property
    def collection(self) -> Collection:
        return self._scope.collection

    @property
    def type(self) -> CollectionType:
        return self._scope.collection.type

    # --- variables ------------------------------------------------------------

    def get(self, name: str) -> str | None:
        """Resolve *name*; ``collection/variable`` addresses a collection directly."""
        if "/" in name:
            collection_name, _, variable = name.rpartition("/")
            collection = self._store.scope_manager.collections.get(collection_name)
            if collection is None:
                return None
            return collection.resolve(variable)
        return self._scope.get(name)

    def set(self, name: str, value: str) -> None:
        self._scope.collection.set(name, value)

    def set_default(self, name: str, value: str) -> None:
        self._scope.collection.set_default(name, value)

    def set_type(self, type_name: str) -> None:
        self._scope.collection.type_name = type_name

    def update(self, collection: Collection) -> None:
        self._store.scope_manager.activate(collection)

    # --- classes --------------------------------------------------------------

    def apply_class(self, target: str, class_name: str) -> None:
        """Copy the declarations of *class_name* onto every selector in *target*."""
        self._copy_class(target.split(","), class_name)

    def extend_class(self, target_class_name: str, class_name: str) -> None:
        """Compose *class_name* into the class *target_class_name*."""
        self._copy_class([f".{target_class_name}"], class_name)

    def _copy_class(self, selectors: list[str], class_name: str) -> None:
        declarations = self._store.find_class(class_name)
        if declarations is None:
            logger.debug("Class %r is not defined; nothing to apply", class_name)
            return
        # Snapshot first: a class applied onto itself must not grow while iterating.
        snapshot = [(prop, list(values)) for prop, values in declarations.items()]
        for prop, values in snapshot:
            for value in values:
                self._store.add_style(selectors, prop, value)
