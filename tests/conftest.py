from __future__ import annotations

import textwrap

import pytest
from tree_sitter import Node

from wexample_filestate_csharp.utils.csharp_syntax_utils import (
    ScopeRegion,
    parse_csharp,
    scope_region,
)


def csharp(code: str) -> str:
    return textwrap.dedent(code).lstrip("\n")


def first_type_region(source: bytes) -> tuple[Node, ScopeRegion]:
    tree = parse_csharp(source)
    assert tree is not None
    type_node = tree.root_node.named_children[0]
    region = scope_region(type_node, len(source))
    assert region is not None
    return type_node, region


@pytest.fixture
def class_body_region():
    def build(body: str) -> tuple[bytes, ScopeRegion]:
        source = ("public class TestClass\n{\n" + csharp(body) + "}\n").encode()
        return source, first_type_region(source)[1]

    return build
