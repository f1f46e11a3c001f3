from __future__ import annotations

from typing import Any

from wexample_config.config_value.config_value import ConfigValue
from wexample_helpers.classes.field import public_field
from wexample_helpers.decorator.base_class import base_class


@base_class
class CSharpConfigValue(ConfigValue):
    check_members_order: bool | None = public_field(
        default=None,
        description="Report members out of SA1201 order without rewriting files",
    )
    order_members: bool | None = public_field(
        default=None,
        description="Order type members: kind, const, static, access level, optional name",
    )
    order_razor_members: bool | None = public_field(
        default=None,
        description="Order members inside @code blocks of .razor files",
    )
    raw: Any = public_field(
        default=None, description="Disabled raw value for this config."
    )

    def to_option_raw_value(self) -> Any:
        from wexample_filestate_csharp.option.csharp.check_members_order_option import (
            CheckMembersOrderOption,
        )
        from wexample_filestate_csharp.option.csharp.order_members_option import (
            OrderMembersOption,
        )
        from wexample_filestate_csharp.option.csharp.order_razor_members_option import (
            OrderRazorMembersOption,
        )

        return {
            CheckMembersOrderOption.get_name(): self.check_members_order,
            OrderMembersOption.get_name(): self.order_members,
            OrderRazorMembersOption.get_name(): self.order_razor_members,
        }
