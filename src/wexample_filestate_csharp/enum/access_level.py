from __future__ import annotations

from enum import Enum


class AccessLevel(Enum):
    PUBLIC = "Public"
    INTERNAL = "Internal"
    PROTECTED_INTERNAL = "ProtectedInternal"
    PROTECTED = "Protected"
    PRIVATE_PROTECTED = "PrivateProtected"
    PRIVATE = "Private"

    @classmethod
    def canonical_order(cls) -> tuple[AccessLevel, ...]:
        return tuple(cls)

    @classmethod
    def from_name(cls, name: str) -> AccessLevel | None:
        """Accepts "ProtectedInternal", "protected internal", "protected_internal"..."""
        wanted = "".join(
            char for char in name.lower() if char not in (" ", "_", "-", "\t")
        )
        for level in cls:
            if level.value.lower() == wanted:
                return level
        return None

    @classmethod
    def from_modifiers(
        cls, modifiers: set[str] | frozenset[str], default: AccessLevel
    ) -> AccessLevel:
        if "public" in modifiers:
            return cls.PUBLIC
        if "private" in modifiers and "protected" in modifiers:
            return cls.PRIVATE_PROTECTED
        if "protected" in modifiers and "internal" in modifiers:
            return cls.PROTECTED_INTERNAL
        if "protected" in modifiers:
            return cls.PROTECTED
        if "internal" in modifiers:
            return cls.INTERNAL
        if "private" in modifiers:
            return cls.PRIVATE
        return default

    @property
    def keyword(self) -> str:
        """The C# spelling, e.g. "protected internal"."""
        return {
            AccessLevel.PUBLIC: "public",
            AccessLevel.INTERNAL: "internal",
            AccessLevel.PROTECTED_INTERNAL: "protected internal",
            AccessLevel.PROTECTED: "protected",
            AccessLevel.PRIVATE_PROTECTED: "private protected",
            AccessLevel.PRIVATE: "private",
        }[self]
