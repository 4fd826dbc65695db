"""Scope and store model: variable bindings plus the accumulated stylesheet."""

from dyescript.store.collection import Collection, CollectionType
from dyescript.store.scope import DyeScopeWrapper, Scope, ScopeManager
from dyescript.store.store import Font, Store

__all__ = [
    "Collection",
    "CollectionType",
    "Scope",
    "ScopeManager",
    "DyeScopeWrapper",
    "Font",
    "Store",
]
