from __future__ import annotations

from enum import Enum


class MemberKind(Enum):
    FIELD = "Field"
    CONSTRUCTOR = "Constructor"
    DESTRUCTOR = "Destructor"
    DELEGATE = "Delegate"
    EVENT = "Event"
    ENUM = "Enum"
    INTERFACE = "Interface"
    PROPERTY = "Property"
    INDEXER = "Indexer"
    METHOD = "Method"
    STRUCT = "Struct"
    CLASS = "Class"

    @classmethod
    def canonical_order(cls) -> tuple[MemberKind, ...]:
        return tuple(cls)

    @classmethod
    def top_level_order(cls) -> tuple[MemberKind, ...]:
        return (cls.ENUM, cls.INTERFACE, cls.STRUCT, cls.CLASS)

    @classmethod
    def from_name(cls, name: str) -> MemberKind | None:
        """Resolve a configured kind name, ignoring case; unknown names give None."""
        wanted = name.strip().lower()
        for kind in cls:
            if kind.value.lower() == wanted:
                return kind
        return None

    @property
    def label(self) -> str:
        return self.value
