from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

import tree_sitter_c_sharp
from tree_sitter import Language, Node, Parser, Tree

logger = logging.getLogger(__name__)

CSHARP_LANGUAGE = Language(tree_sitter_c_sharp.language())

TYPE_BODY_NODE_TYPES = frozenset(
    {
        "class_declaration",
        "interface_declaration",
        "record_declaration",
        "record_struct_declaration",
        "struct_declaration",
    }
)
NAMESPACE_NODE_TYPE = "namespace_declaration"
FILE_SCOPED_NAMESPACE_NODE_TYPE = "file_scoped_namespace_declaration"
COMPILATION_UNIT_NODE_TYPE = "compilation_unit"

# Everything the flattening of conditional blocks collects as a scope item.
SCOPE_ITEM_NODE_TYPES = frozenset(
    {
        "class_declaration",
        "constructor_declaration",
        "conversion_operator_declaration",
        "delegate_declaration",
        "destructor_declaration",
        "enum_declaration",
        "event_declaration",
        "event_field_declaration",
        "extern_alias_directive",
        "field_declaration",
        "global_attribute",
        "global_statement",
        "indexer_declaration",
        "interface_declaration",
        "method_declaration",
        "namespace_declaration",
        "operator_declaration",
        "property_declaration",
        "record_declaration",
        "record_struct_declaration",
        "struct_declaration",
        "using_directive",
    }
)

MODIFIER_KEYWORDS = frozenset(
    {
        "abstract",
        "async",
        "const",
        "extern",
        "file",
        "fixed",
        "internal",
        "new",
        "override",
        "partial",
        "private",
        "protected",
        "public",
        "readonly",
        "required",
        "scoped",
        "sealed",
        "static",
        "unsafe",
        "virtual",
        "volatile",
    }
)


class ScopeKind(Enum):
    TOP_LEVEL = "top_level"
    TYPE_BODY = "type_body"


@dataclass(frozen=True)
class ScopeRegion:
    """Byte range of a scope's contents plus the nodes found inside it.

    ``items`` holds ``(start, end, node)`` triples in textual order; ``node``
    is None for spans kept verbatim, such as a file-scoped namespace header.
    """

    kind: ScopeKind
    start: int
    end: int
    items: tuple[tuple[int, int, Node | None], ...]
    braced: bool


def parse_csharp(source: bytes) -> Tree | None:
    """Parse C# source, returning None when the tree contains errors."""
    tree = Parser(CSHARP_LANGUAGE).parse(source)
    if tree.root_node.has_error:
        logger.debug("C# source could not be parsed without errors")
        return None
    return tree


def node_text(source: bytes, node: Node) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", "surrogatepass")


def find_child(node: Node, node_type: str) -> Node | None:
    for child in node.children:
        if child.type == node_type:
            return child
    return None


def find_descendant(node: Node, node_type: str) -> Node | None:
    pending = list(node.children)
    while pending:
        child = pending.pop(0)
        if child.type == node_type:
            return child
        pending.extend(child.children)
    return None


def node_modifiers(source: bytes, node: Node) -> frozenset[str]:
    modifiers = set()
    for child in node.children:
        if child.type == "modifier":
            modifiers.update(node_text(source, child).split())
        elif not child.is_named and child.type in MODIFIER_KEYWORDS:
            modifiers.add(child.type)
    return frozenset(modifiers)


def declaration_name(source: bytes, node: Node) -> str:
    node_type = node.type
    if node_type == "indexer_declaration":
        return "this[]"

    if node_type in ("field_declaration", "event_field_declaration"):
        declarator = find_descendant(node, "variable_declarator")
        if declarator is not None:
            return _identifier_text(source, declarator) or node_text(source, declarator)
        return "<unnamed>"

    if node_type == "operator_declaration":
        token = _operator_token(node)
        if token is not None:
            return f"operator {node_text(source, token)}"
        return "operator"

    if node_type == "conversion_operator_declaration":
        target = node.child_by_field_name("type")
        if target is not None:
            return f"operator {node_text(source, target)}"
        return "operator"

    return _identifier_text(source, node) or "<unnamed>"


def scope_region(node: Node, source_length: int) -> ScopeRegion | None:
    """Describe the reorderable scope owned by ``node``, if it has one."""
    if node.type == COMPILATION_UNIT_NODE_TYPE:
        # The root may not span leading or trailing trivia, the file does.
        return ScopeRegion(
            kind=ScopeKind.TOP_LEVEL,
            start=0,
            end=source_length,
            items=tuple(_collect_items(node.children)),
            braced=False,
        )

    if node.type in TYPE_BODY_NODE_TYPES:
        body = find_child(node, "declaration_list")
        return _braced_region(ScopeKind.TYPE_BODY, body)

    if node.type == NAMESPACE_NODE_TYPE:
        body = find_child(node, "declaration_list")
        return _braced_region(ScopeKind.TOP_LEVEL, body)

    return None


def _braced_region(kind: ScopeKind, body: Node | None) -> ScopeRegion | None:
    if body is None or len(body.children) < 2:
        return None
    open_brace = body.children[0]
    close_brace = body.children[-1]
    if open_brace.type != "{" or close_brace.type != "}":
        return None
    return ScopeRegion(
        kind=kind,
        start=open_brace.end_byte,
        end=close_brace.start_byte,
        items=tuple(_collect_items(body.children[1:-1])),
        braced=True,
    )


def _collect_items(children: list[Node]) -> Iterator[tuple[int, int, Node | None]]:
    for child in children:
        if child.type == "comment":
            continue
        if child.type.startswith("preproc"):
            yield from _collect_conditional_items(child)
            continue
        if child.type == FILE_SCOPED_NAMESPACE_NODE_TYPE:
            yield from _collect_file_scoped_namespace(child)
            continue
        yield child.start_byte, child.end_byte, child


def _collect_conditional_items(
    directive: Node,
) -> Iterator[tuple[int, int, Node | None]]:
    for child in directive.children:
        if child.type.startswith("preproc"):
            yield from _collect_conditional_items(child)
        elif child.type in SCOPE_ITEM_NODE_TYPES:
            yield child.start_byte, child.end_byte, child
        elif child.type == FILE_SCOPED_NAMESPACE_NODE_TYPE:
            yield from _collect_file_scoped_namespace(child)


def _collect_file_scoped_namespace(
    namespace: Node,
) -> Iterator[tuple[int, int, Node | None]]:
    # The header stays put; declarations after it join the enclosing scope.
    header_end = namespace.end_byte
    remaining: list[Node] = []
    for position, child in enumerate(namespace.children):
        if child.type == ";":
            header_end = child.end_byte
            remaining = namespace.children[position + 1 :]
            break

    yield namespace.start_byte, header_end, None
    yield from _collect_items(remaining)


def _identifier_text(source: bytes, node: Node) -> str | None:
    name = node.child_by_field_name("name")
    if name is not None:
        return node_text(source, name)
    identifier = find_child(node, "identifier")
    if identifier is not None:
        return node_text(source, identifier)
    return None


def _operator_token(node: Node) -> Node | None:
    operator = node.child_by_field_name("operator")
    if operator is not None:
        return operator

    seen_keyword = False
    for child in node.children:
        if child.type == "operator":
            seen_keyword = True
        elif seen_keyword and child.type != "checked":
            return child
    return None
