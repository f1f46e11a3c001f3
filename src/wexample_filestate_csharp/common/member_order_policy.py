from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from wexample_filestate_csharp.enum.access_level import AccessLevel
from wexample_filestate_csharp.enum.member_kind import MemberKind

logger = logging.getLogger(__name__)

# Normalized key (lowercase, no separators) -> dataclass field
_KEY_ALIASES: dict[str, str] = {
    "membertypeorder": "member_kind_order",
    "memberkindorder": "member_kind_order",
    "accesslevelorder": "access_level_order",
    "topleveltypeorder": "top_level_type_order",
    "staticmembersfirst": "static_members_first",
    "staticfirst": "static_members_first",
    "constmembersfirst": "const_members_first",
    "constfirst": "const_members_first",
    "alphabeticalsort": "alphabetical_sort",
    "alphabeticaltiebreak": "alphabetical_sort",
    "sorttopleveltypes": "sort_top_level_types",
    "insertblanklinebetweenmembers": "insert_blank_line_between_members",
}

_KIND_ORDER_FIELDS = ("member_kind_order", "top_level_type_order")


def _normalize_key(key: str) -> str:
    return "".join(char for char in key.lower() if char not in ("_", "-", " "))


@dataclass(frozen=True)
class MemberOrderPolicy:
    """Immutable sort configuration shared read-only by every pass.

    ``None`` order lists mean the built-in default order.
    """

    member_kind_order: tuple[MemberKind, ...] | None = None
    access_level_order: tuple[AccessLevel, ...] | None = None
    top_level_type_order: tuple[MemberKind, ...] | None = None
    static_members_first: bool = True
    const_members_first: bool = True
    alphabetical_sort: bool = False
    sort_top_level_types: bool = False
    insert_blank_line_between_members: bool = False

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> MemberOrderPolicy:
        return cls().merged_with(values)

    def merged_with(self, values: Mapping[str, Any]) -> MemberOrderPolicy:
        """Return a copy where every recognized key present in ``values`` wins."""
        changes: dict[str, Any] = {}
        for key, value in values.items():
            field_name = _KEY_ALIASES.get(_normalize_key(str(key)))
            if field_name is None:
                logger.debug("Ignoring unknown member order option %r", key)
                continue
            changes[field_name] = _parse_field_value(field_name, key, value)

        if not changes:
            return self
        return dataclasses.replace(self, **changes)

    def resolved_member_kind_order(self) -> tuple[MemberKind, ...]:
        if self.member_kind_order is None:
            return MemberKind.canonical_order()
        return self.member_kind_order

    def resolved_access_level_order(self) -> tuple[AccessLevel, ...]:
        if self.access_level_order is None:
            return AccessLevel.canonical_order()
        return self.access_level_order

    def resolved_top_level_type_order(self) -> tuple[MemberKind, ...]:
        if self.top_level_type_order is None:
            return MemberKind.top_level_order()
        return self.top_level_type_order

    def to_mapping(self) -> dict[str, Any]:
        """Serialize using the keys understood by ``.sa1201ierrc`` files."""

        def names(values: tuple[Any, ...] | None) -> list[str] | None:
            return None if values is None else [value.value for value in values]

        return {
            "memberTypeOrder": names(self.member_kind_order),
            "accessLevelOrder": names(self.access_level_order),
            "topLevelTypeOrder": names(self.top_level_type_order),
            "staticMembersFirst": self.static_members_first,
            "constMembersFirst": self.const_members_first,
            "alphabeticalSort": self.alphabetical_sort,
            "sortTopLevelTypes": self.sort_top_level_types,
            "insertBlankLineBetweenMembers": self.insert_blank_line_between_members,
        }


def _parse_field_value(field_name: str, key: Any, value: Any) -> Any:
    if field_name in _KIND_ORDER_FIELDS:
        return _parse_order(key, value, MemberKind.from_name)
    if field_name == "access_level_order":
        return _parse_order(key, value, AccessLevel.from_name)

    if not isinstance(value, bool):
        raise ValueError(f"Option {key!r} expects a boolean, got {value!r}")
    return value


def _parse_order(key: Any, value: Any, resolve: Any) -> tuple[Any, ...] | None:
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ValueError(f"Option {key!r} expects a list of names, got {value!r}")
    if not value:
        return None

    resolved = []
    for name in value:
        if isinstance(name, (MemberKind, AccessLevel)):
            item = name
        elif isinstance(name, str):
            item = resolve(name)
        else:
            raise ValueError(f"Option {key!r} expects names, got {name!r}")

        if item is None:
            # Unknown names rank with the unspecified ones.
            logger.debug("Unknown name %r in option %r", name, key)
        elif item not in resolved:
            resolved.append(item)
    return tuple(resolved)
