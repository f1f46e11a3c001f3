from __future__ import annotations

from wexample_filestate_csharp.common.member_descriptor import MemberDescriptor
from wexample_filestate_csharp.enum.access_level import AccessLevel
from wexample_filestate_csharp.enum.member_kind import MemberKind
from wexample_filestate_csharp.utils.csharp_member_classifier_utils import (
    classify_member,
)
from wexample_filestate_csharp.utils.csharp_syntax_utils import (
    parse_csharp,
    scope_region,
)


def _classify_body(class_body_region, body: str) -> list[MemberDescriptor | None]:
    source, region = class_body_region(body)
    return [
        classify_member(source, node, index)
        for index, (_, _, node) in enumerate(region.items)
    ]


def test_every_member_kind(class_body_region) -> None:
    descriptors = _classify_body(
        class_body_region,
        """\
            private int _field;
            public TestClass() { }
            ~TestClass() { }
            public delegate void Handler();
            public event Handler Changed;
            public event Handler Removed { add { } remove { } }
            public enum Mode { On, Off }
            public interface IShape { }
            public int Count { get; set; }
            public int this[int index] => index;
            public void Run() { }
            public static TestClass operator +(TestClass a, TestClass b) => a;
            public struct Point { }
            public class Nested { }
            public record Entry(int Id);
        """,
    )

    assert [descriptor.kind for descriptor in descriptors] == [
        MemberKind.FIELD,
        MemberKind.CONSTRUCTOR,
        MemberKind.DESTRUCTOR,
        MemberKind.DELEGATE,
        MemberKind.EVENT,
        MemberKind.EVENT,
        MemberKind.ENUM,
        MemberKind.INTERFACE,
        MemberKind.PROPERTY,
        MemberKind.INDEXER,
        MemberKind.METHOD,
        MemberKind.METHOD,
        MemberKind.STRUCT,
        MemberKind.CLASS,
        MemberKind.CLASS,
    ]


def test_access_levels_and_private_default(class_body_region) -> None:
    descriptors = _classify_body(
        class_body_region,
        """\
            int _implicit;
            protected internal int _a;
            internal protected int _b;
            private protected int _c;
            protected int _d;
            internal int _e;
        """,
    )

    assert [descriptor.access_level for descriptor in descriptors] == [
        AccessLevel.PRIVATE,
        AccessLevel.PROTECTED_INTERNAL,
        AccessLevel.PROTECTED_INTERNAL,
        AccessLevel.PRIVATE_PROTECTED,
        AccessLevel.PROTECTED,
        AccessLevel.INTERNAL,
    ]


def test_const_and_static_flags(class_body_region) -> None:
    const, static, readonly_static, method = _classify_body(
        class_body_region,
        """\
            public const int Max = 10;
            private static int _shared;
            public static readonly int Default = 1;
            public static void Reset() { }
        """,
    )

    assert (const.is_const, const.is_static, const.label) == (True, False, "Const Field")
    assert (static.is_const, static.is_static) == (False, True)
    assert readonly_static.is_static
    assert method.label == "Static Method"
    assert method.describe() == "public Static Method"


def test_multiple_variables_form_one_member(class_body_region) -> None:
    descriptors = _classify_body(class_body_region, "    private int a, b, c;\n")

    assert len(descriptors) == 1
    assert descriptors[0].name == "a"


def test_position_is_one_based(class_body_region) -> None:
    (descriptor,) = _classify_body(
        class_body_region, "#region R\n    public int X;\n#endregion\n"
    )

    assert (descriptor.line, descriptor.column) == (4, 5)
    assert descriptor.index == 0


def test_top_level_types_default_to_internal() -> None:
    source = b"class A { }\npublic struct B { }\ndelegate void D();\n"
    tree = parse_csharp(source)
    assert tree is not None
    region = scope_region(tree.root_node, len(source))
    assert region is not None

    a, b, d = [
        classify_member(source, node, index, top_level=True)
        for index, (_, _, node) in enumerate(region.items)
    ]

    assert (a.kind, a.access_level) == (MemberKind.CLASS, AccessLevel.INTERNAL)
    assert (b.kind, b.access_level) == (MemberKind.STRUCT, AccessLevel.PUBLIC)
    assert d is None


def test_using_directive_is_not_a_member() -> None:
    source = b"using System;\nnamespace N { }\n"
    tree = parse_csharp(source)
    assert tree is not None
    region = scope_region(tree.root_node, len(source))
    assert region is not None

    assert [
        classify_member(source, node, index, top_level=True)
        for index, (_, _, node) in enumerate(region.items)
    ] == [None, None]
