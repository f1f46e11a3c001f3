from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from wexample_filestate_csharp.common.member_descriptor import MemberDescriptor
from wexample_filestate_csharp.common.member_order_policy import MemberOrderPolicy

SortKey = Callable[[MemberDescriptor], tuple[Any, ...]]


def _rank(value: Any, order: Sequence[Any]) -> int:
    # Unspecified values share the rank after every listed one.
    try:
        return order.index(value)
    except ValueError:
        return len(order)


def _flag_rank(flag: bool, flagged_first: bool) -> int:
    return 0 if flag == flagged_first else 1


def member_sort_key(policy: MemberOrderPolicy) -> SortKey:
    """Build the key for type-body members.

    Precedence: kind, const-ness, static-ness, access level, then the name
    when alphabetical sorting is on. ``sorted`` being stable keeps ties in
    encounter order.
    """
    kind_order = policy.resolved_member_kind_order()
    access_order = policy.resolved_access_level_order()

    def key(descriptor: MemberDescriptor) -> tuple[Any, ...]:
        return (
            _rank(descriptor.kind, kind_order),
            _flag_rank(descriptor.is_const, policy.const_members_first),
            _flag_rank(descriptor.is_static, policy.static_members_first),
            _rank(descriptor.access_level, access_order),
            descriptor.name if policy.alphabetical_sort else "",
        )

    return key


def top_level_sort_key(policy: MemberOrderPolicy) -> SortKey:
    """Same precedence as members, over type kinds and without const/static."""
    kind_order = policy.resolved_top_level_type_order()
    access_order = policy.resolved_access_level_order()

    def key(descriptor: MemberDescriptor) -> tuple[Any, ...]:
        return (
            _rank(descriptor.kind, kind_order),
            _rank(descriptor.access_level, access_order),
            descriptor.name if policy.alphabetical_sort else "",
        )

    return key


def compare_members(
    first: MemberDescriptor, second: MemberDescriptor, key: SortKey
) -> int:
    first_key = key(first)
    second_key = key(second)
    if first_key < second_key:
        return -1
    if first_key > second_key:
        return 1
    return 0


def canonical_order(
    descriptors: Sequence[MemberDescriptor], key: SortKey
) -> list[MemberDescriptor]:
    return sorted(descriptors, key=key)
