from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from wexample_helpers.decorator.base_class import base_class

from .abstract_csharp_file_content_option import AbstractCSharpFileContentOption

if TYPE_CHECKING:
    from wexample_filestate_csharp.common.member_order_policy import (
        MemberOrderPolicy,
    )


@base_class
class OrderRazorMembersOption(AbstractCSharpFileContentOption):
    _file_extension: ClassVar[str] = ".razor"

    def get_description(self) -> str:
        return "Order members declared in the @code blocks of Razor components."

    def _transform_source(self, src: str, policy: MemberOrderPolicy) -> str:
        from wexample_filestate_csharp.utils.csharp_razor_utils import (
            format_razor_members_order,
        )

        return format_razor_members_order(src, policy).output_text
