from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from wexample_filestate_csharp.enum.structure_marker import StructureMarker
from wexample_filestate_csharp.utils.csharp_member_grouping_utils import (
    MemberGroup,
    group_members,
)

OPEN_IF = StructureMarker.OPEN_CONDITIONAL
ELSE = StructureMarker.BRANCH_CONDITIONAL
END_IF = StructureMarker.CLOSE_CONDITIONAL
OPEN_REGION = StructureMarker.OPEN_REGION
END_REGION = StructureMarker.CLOSE_REGION


def _indices(groups: list[MemberGroup]) -> list[tuple[int, ...]]:
    return [group.indices for group in groups]


def test_body_without_markers_is_one_group() -> None:
    groups = group_members([(), (), ()])

    assert groups == [MemberGroup((0, 1, 2), 0, 0)]


def test_empty_body_has_no_groups() -> None:
    assert group_members([]) == []


def test_conditional_block_is_isolated() -> None:
    groups = group_members([(OPEN_IF,), (END_IF,), ()])

    assert _indices(groups) == [(0,), (1, 2)]
    assert groups[0].conditional_depth == 1
    assert groups[1].conditional_depth == 0


def test_alternate_branches_are_separate_groups() -> None:
    groups = group_members([(OPEN_IF,), (), (ELSE,), (), (END_IF,), ()])

    assert _indices(groups) == [(0, 1), (2, 3), (4, 5)]


def test_adjacent_regions_stay_separate() -> None:
    groups = group_members([(OPEN_REGION,), (), (END_REGION, OPEN_REGION), ()])

    assert _indices(groups) == [(0, 1), (2, 3)]
    assert [group.region_depth for group in groups] == [1, 1]


def test_nested_blocks_record_both_depths() -> None:
    groups = group_members([(OPEN_REGION,), (OPEN_IF,), (END_IF,), (END_REGION,)])

    assert _indices(groups) == [(0,), (1,), (2,), (3,)]
    assert [(g.conditional_depth, g.region_depth) for g in groups] == [
        (0, 1),
        (1, 1),
        (0, 1),
        (0, 0),
    ]


def test_stray_close_markers_are_clamped() -> None:
    groups = group_members([(END_IF, END_REGION), ()])

    assert groups == [MemberGroup((0, 1), 0, 0)]


def test_unterminated_block_runs_to_end() -> None:
    groups = group_members([(), (OPEN_REGION,), (), ()])

    assert _indices(groups) == [(0,), (1, 2, 3)]
    assert groups[-1].region_depth == 1


def test_anchor_splits_groups() -> None:
    groups = group_members([(), (StructureMarker.ANCHOR,), ()])

    assert _indices(groups) == [(0,), (1, 2)]


@given(
    st.lists(
        st.lists(st.sampled_from(list(StructureMarker)), max_size=3),
        max_size=20,
    )
)
def test_groups_partition_members_in_order(markers: list[list[StructureMarker]]) -> None:
    groups = group_members(markers)

    flattened = [index for group in groups for index in group.indices]

    assert flattened == list(range(len(markers)))
    assert all(group.indices for group in groups)
    assert all(g.conditional_depth >= 0 and g.region_depth >= 0 for g in groups)
