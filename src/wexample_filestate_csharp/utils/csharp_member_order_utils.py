from __future__ import annotations

import logging
from typing import Union

from tree_sitter import Node

from wexample_filestate_csharp.common.formatting_result import FormattingResult
from wexample_filestate_csharp.common.member_descriptor import MemberDescriptor
from wexample_filestate_csharp.common.member_order_policy import MemberOrderPolicy
from wexample_filestate_csharp.common.violation import Violation
from wexample_filestate_csharp.utils.csharp_member_classifier_utils import (
    classify_member,
)
from wexample_filestate_csharp.utils.csharp_member_grouping_utils import group_members
from wexample_filestate_csharp.utils.csharp_member_rewriter_utils import (
    placement_map,
    render_scope,
    scope_newline,
)
from wexample_filestate_csharp.utils.csharp_order_engine_utils import order_groups
from wexample_filestate_csharp.utils.csharp_scope_layout_utils import (
    AnchorSegment,
    MemberSegment,
    ScopeItem,
    TriviaSegment,
    build_scope_layout,
)
from wexample_filestate_csharp.utils.csharp_sort_policy_utils import (
    member_sort_key,
    top_level_sort_key,
)
from wexample_filestate_csharp.utils.csharp_syntax_utils import (
    ScopeKind,
    parse_csharp,
    scope_region,
)

logger = logging.getLogger(__name__)

_ENCODING = "utf-8"
_ENCODING_ERRORS = "surrogatepass"


class _MemberOrderWalker:
    """Walks every scope of one parsed file, outer scopes first.

    In check mode nothing moves and the walk only collects violations; in
    format mode each scope is rebuilt with its groups in canonical order.
    """

    def __init__(self, source: bytes, policy: MemberOrderPolicy, reorder: bool):
        self.source = source
        self.policy = policy
        self.reorder = reorder
        self.violations: list[Violation] = []
        self._member_key = member_sort_key(policy)
        self._top_level_key = top_level_sort_key(policy)

    def render_file(self, root: Node) -> bytes:
        return self.render_node(root)

    def render_node(self, node: Node) -> bytes:
        region = scope_region(node, len(self.source))
        if region is None:
            return self.source[node.start_byte : node.end_byte]

        top_level = region.kind is ScopeKind.TOP_LEVEL
        descriptors: list[MemberDescriptor] = []
        items: list[ScopeItem] = []
        for start, end, child in region.items:
            descriptor = None
            if child is not None:
                descriptor = classify_member(
                    self.source, child, index=len(descriptors), top_level=top_level
                )
            if descriptor is not None:
                descriptors.append(descriptor)
            items.append(
                ScopeItem(
                    start=start, end=end, node=child, orderable=descriptor is not None
                )
            )

        layout = build_scope_layout(
            self.source, region.start, region.end, items, braced=region.braced
        )
        groups = group_members(layout.markers_before_members())
        placement: dict[int, int] = {}

        if not top_level or self.policy.sort_top_level_types:
            key = self._top_level_key if top_level else self._member_key
            orders, violations = order_groups(descriptors, groups, key)
            self.violations.extend(violations)
            if self.reorder and violations:
                placement = placement_map(groups, orders)
                logger.debug(
                    "Reordered %d group(s) in scope at line %d",
                    len(violations),
                    violations[0].line,
                )

        # Children render in source order so nested violations keep that order.
        rendered = {
            (segment.start, segment.end): self._render_item(segment)
            for segment in layout.segments
            if not isinstance(segment, TriviaSegment)
        }
        # Single-line bodies keep their spacing.
        newline = scope_newline(layout)
        body = render_scope(
            layout,
            placement,
            lambda segment: rendered[(segment.start, segment.end)],
            normalize_blank_lines=(
                self.reorder
                and not top_level
                and newline is not None
                and self.policy.insert_blank_line_between_members
            ),
            newline=newline or b"\n",
        )

        if node.type == "compilation_unit":
            return body
        return (
            self.source[node.start_byte : region.start]
            + body
            + self.source[region.end : node.end_byte]
        )

    def _render_item(self, segment: Union[AnchorSegment, MemberSegment]) -> bytes:
        if segment.node is None:
            return self.source[segment.start : segment.end]
        return self.render_node(segment.node)


def _run(
    source_text: str, policy: MemberOrderPolicy | None, reorder: bool
) -> FormattingResult:
    policy = policy or MemberOrderPolicy()
    source = source_text.encode(_ENCODING, _ENCODING_ERRORS)

    tree = parse_csharp(source)
    if tree is None:
        return FormattingResult(original_text=source_text, parse_failed=True)

    walker = _MemberOrderWalker(source, policy, reorder=reorder)
    rendered = walker.render_file(tree.root_node)

    formatted_text = None
    if reorder and rendered != source:
        formatted_text = rendered.decode(_ENCODING, _ENCODING_ERRORS)

    return FormattingResult(
        original_text=source_text,
        formatted_text=formatted_text,
        violations=tuple(walker.violations),
    )


def check_members_order(
    source_text: str, policy: MemberOrderPolicy | None = None
) -> FormattingResult:
    """Report members standing before their canonical position.

    Only the first divergence of each group is reported. Unparsable input
    yields a result flagged ``parse_failed`` rather than an exception.
    """
    return _run(source_text, policy, reorder=False)


def format_members_order(
    source_text: str, policy: MemberOrderPolicy | None = None
) -> FormattingResult:
    """Reorder members canonically, keeping every other byte of the source.

    ``formatted_text`` stays None when nothing changed or the input could
    not be parsed. Violations match what ``check_members_order`` reports.
    """
    return _run(source_text, policy, reorder=True)
