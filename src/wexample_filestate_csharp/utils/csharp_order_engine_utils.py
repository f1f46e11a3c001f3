from __future__ import annotations

from collections.abc import Sequence

from wexample_filestate_csharp.common.member_descriptor import MemberDescriptor
from wexample_filestate_csharp.common.violation import Violation
from wexample_filestate_csharp.utils.csharp_member_grouping_utils import MemberGroup
from wexample_filestate_csharp.utils.csharp_sort_policy_utils import (
    SortKey,
    canonical_order,
)


def describe_violation(actual: MemberDescriptor, expected: MemberDescriptor) -> str:
    return (
        f"{actual.label} '{actual.name}' is out of order. "
        f"Expected: {expected.describe()}, Actual: {actual.describe()}"
    )


def first_violation(
    original: Sequence[MemberDescriptor], ordered: Sequence[MemberDescriptor]
) -> Violation | None:
    for actual, expected in zip(original, ordered):
        if actual.index != expected.index:
            return Violation(
                line=actual.line,
                column=actual.column,
                description=describe_violation(actual, expected),
                member_name=actual.name,
            )
    return None


def order_groups(
    descriptors: Sequence[MemberDescriptor],
    groups: Sequence[MemberGroup],
    key: SortKey,
) -> tuple[list[tuple[int, ...]], list[Violation]]:
    """Compute the canonical order of every group.

    Returns the new index sequence of each group, in group order, and at most
    one violation per group: the first position where the original and
    canonical sequences disagree. Groups of a single member never move.
    """
    orders: list[tuple[int, ...]] = []
    violations: list[Violation] = []

    for group in groups:
        original = [descriptors[index] for index in group.indices]
        if len(original) < 2:
            orders.append(group.indices)
            continue

        ordered = canonical_order(original, key)
        violation = first_violation(original, ordered)
        if violation is None:
            orders.append(group.indices)
            continue

        violations.append(violation)
        orders.append(tuple(descriptor.index for descriptor in ordered))

    return orders, violations
