from __future__ import annotations

from tree_sitter import Node

from wexample_filestate_csharp.common.member_descriptor import MemberDescriptor
from wexample_filestate_csharp.enum.access_level import AccessLevel
from wexample_filestate_csharp.enum.member_kind import MemberKind
from wexample_filestate_csharp.utils.csharp_syntax_utils import (
    declaration_name,
    node_modifiers,
)
from wexample_filestate_csharp.utils.csharp_trivia_utils import line_and_column

NODE_TYPE_KINDS: dict[str, MemberKind] = {
    "field_declaration": MemberKind.FIELD,
    "constructor_declaration": MemberKind.CONSTRUCTOR,
    "destructor_declaration": MemberKind.DESTRUCTOR,
    "delegate_declaration": MemberKind.DELEGATE,
    "event_declaration": MemberKind.EVENT,
    "event_field_declaration": MemberKind.EVENT,
    "enum_declaration": MemberKind.ENUM,
    "interface_declaration": MemberKind.INTERFACE,
    "property_declaration": MemberKind.PROPERTY,
    "indexer_declaration": MemberKind.INDEXER,
    "method_declaration": MemberKind.METHOD,
    "operator_declaration": MemberKind.METHOD,
    "conversion_operator_declaration": MemberKind.METHOD,
    "struct_declaration": MemberKind.STRUCT,
    "class_declaration": MemberKind.CLASS,
    "record_declaration": MemberKind.CLASS,
    "record_struct_declaration": MemberKind.CLASS,
}

TOP_LEVEL_KINDS = frozenset(MemberKind.top_level_order())


def member_kind_of(node: Node, top_level: bool = False) -> MemberKind | None:
    kind = NODE_TYPE_KINDS.get(node.type)
    if kind is None:
        return None
    if top_level and kind not in TOP_LEVEL_KINDS:
        return None
    return kind


def classify_member(
    source: bytes, node: Node, index: int, top_level: bool = False
) -> MemberDescriptor | None:
    """Describe an orderable declaration, or return None for anything else.

    Members without an accessibility modifier default to private inside a
    type body and to internal at top level. A field declaring several
    variables stays a single member named after its first variable.
    """
    kind = member_kind_of(node, top_level=top_level)
    if kind is None:
        return None

    modifiers = node_modifiers(source, node)
    default_access = AccessLevel.INTERNAL if top_level else AccessLevel.PRIVATE
    line, column = line_and_column(source, node.start_byte)

    return MemberDescriptor(
        index=index,
        kind=kind,
        access_level=AccessLevel.from_modifiers(modifiers, default=default_access),
        is_static="static" in modifiers,
        is_const=kind is MemberKind.FIELD and "const" in modifiers,
        name=declaration_name(source, node),
        start_offset=node.start_byte,
        end_offset=node.end_byte,
        line=line,
        column=column,
    )
