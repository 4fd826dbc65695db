"""Named bags of variable bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CollectionType(Enum):
    """What ``$``/``style`` statements write to while a collection is active."""

    IMPLICIT = "implicit"
    STYLE = "style"
    ANIMATION = "animation"
    MOTION = "motion"
    FONT = "font"

    @classmethod
    def from_name(cls, value: str) -> CollectionType | None:
        """The known type for a tag, or ``None`` for tags the compiler has no routing for."""
        try:
            return cls(value.lower())
        except ValueError:
            return None


@dataclass
class Collection:
    """Explicit and default variable bindings under one name."""

    name: str
    variables: dict[str, str] = field(default_factory=dict)
    defaults: dict[str, str] = field(default_factory=dict)
    type_name: str = CollectionType.IMPLICIT.value

    @property
    def type(self) -> CollectionType:
        """Routing type; unknown tags write styles like ``implicit``."""
        return CollectionType.from_name(self.type_name) or CollectionType.IMPLICIT

    def set(self, name: str, value: str) -> None:
        self.variables[name] = value

    def set_default(self, name: str, value: str) -> None:
        self.defaults[name] = value

    def explicit(self, name: str) -> str | None:
        return self.variables.get(name)

    def default(self, name: str) -> str | None:
        return self.defaults.get(name)

    def resolve(self, name: str) -> str | None:
        """Explicit value first, then the default."""
        value = self.explicit(name)
        if value is None:
            value = self.default(name)
        return value
