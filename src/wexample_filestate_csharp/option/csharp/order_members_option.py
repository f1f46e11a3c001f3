from __future__ import annotations

from typing import TYPE_CHECKING

from wexample_helpers.decorator.base_class import base_class

from .abstract_csharp_file_content_option import AbstractCSharpFileContentOption

if TYPE_CHECKING:
    from wexample_filestate_csharp.common.member_order_policy import (
        MemberOrderPolicy,
    )


@base_class
class OrderMembersOption(AbstractCSharpFileContentOption):
    def get_description(self) -> str:
        return "Order C# type members by kind, static/const, access level (SA1201/SA1202/SA1204)."

    def _transform_source(self, src: str, policy: MemberOrderPolicy) -> str:
        """Members inside #if/#region blocks are only reordered among themselves.

        Unparsable files are left untouched.
        """
        from wexample_filestate_csharp.utils.csharp_member_order_utils import (
            format_members_order,
        )

        return format_members_order(src, policy).output_text
