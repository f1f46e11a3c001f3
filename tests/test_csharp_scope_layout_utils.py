from __future__ import annotations

from wexample_filestate_csharp.enum.structure_marker import StructureMarker
from wexample_filestate_csharp.utils.csharp_scope_layout_utils import (
    AnchorSegment,
    ScopeItem,
    MemberSegment,
    ScopeLayout,
    TriviaSegment,
    build_scope_layout,
)


def _layout_text(source: bytes, layout: ScopeLayout) -> bytes:
    parts: list[bytes] = []
    for segment in layout.segments:
        if isinstance(segment, TriviaSegment):
            parts.append(segment.text)
        elif isinstance(segment, MemberSegment):
            parts.append(
                segment.leading + source[segment.start : segment.end] + segment.trailing
            )
        else:
            parts.append(source[segment.start : segment.end] + segment.trailing)
    return b"".join(parts)


def _layout(source: bytes, region, orderable: bool = True):
    items = [
        ScopeItem(start=start, end=end, node=node, orderable=orderable)
        for start, end, node in region.items
    ]
    return build_scope_layout(
        source, region.start, region.end, items, braced=region.braced
    )


def test_layout_assigns_trivia_to_members(class_body_region) -> None:
    source, region = class_body_region(
        """\
            // Counter.
            private int _a; // trailing
        #region Public
            public int B;
        #endregion
        """
    )

    layout = _layout(source, region)
    first, second = layout.members

    assert first.leading == b"    // Counter.\n    "
    assert first.trailing == b" // trailing\n"
    assert first.markers_before == ()
    assert second.leading == b"    "
    assert second.trailing == b"\n"
    assert second.markers_before == (StructureMarker.OPEN_REGION,)
    assert layout.trailing_markers == (StructureMarker.CLOSE_REGION,)


def test_layout_reproduces_scope_text(class_body_region) -> None:
    source, region = class_body_region(
        """\
        #if DEBUG
            /// <summary>Debug only.</summary>
            [Conditional("DEBUG")]
            private void Trace() { } /* inline */
        #endif

            public int Value { get; set; }
        """
    )

    layout = _layout(source, region)

    assert _layout_text(source, layout) == source[region.start : region.end]
    assert [member.markers_before for member in layout.members] == [
        (StructureMarker.OPEN_CONDITIONAL,),
        (StructureMarker.CLOSE_CONDITIONAL,),
    ]


def test_anchors_keep_their_gap_and_mark_a_boundary(class_body_region) -> None:
    source, region = class_body_region(
        """\
            private int _a;

            // stays with the anchor
            public void Anchor() { }
            public int B;
        """
    )
    first, anchor, last = region.items
    items = [
        ScopeItem(first[0], first[1], first[2], True),
        ScopeItem(anchor[0], anchor[1], anchor[2], False),
        ScopeItem(last[0], last[1], last[2], True),
    ]

    layout = build_scope_layout(source, region.start, region.end, items)

    assert len(layout.members) == 2
    assert any(isinstance(segment, AnchorSegment) for segment in layout.segments)
    assert layout.members[1].markers_before == (StructureMarker.ANCHOR,)
    assert _layout_text(source, layout) == source[region.start : region.end]
    assert layout.segments[2].text == b"\n// stays with the anchor\n"
