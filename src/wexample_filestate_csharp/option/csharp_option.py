from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from wexample_config.config_option.abstract_config_option import AbstractConfigOption
from wexample_config.config_option.abstract_nested_config_option import (
    AbstractNestedConfigOption,
)
from wexample_filestate.enum.scopes import Scope
from wexample_filestate.operation.abstract_operation import AbstractOperation
from wexample_filestate.option.mixin.option_mixin import OptionMixin
from wexample_helpers.decorator.base_class import base_class

if TYPE_CHECKING:
    from wexample_filestate.const.types_state_items import TargetFileOrDirectoryType


@base_class
class CSharpOption(OptionMixin, AbstractNestedConfigOption):
    @staticmethod
    def get_raw_value_allowed_type() -> Any:
        from wexample_filestate_csharp.config_value.csharp_config_value import (
            CSharpConfigValue,
        )

        return Union[list[str], dict, CSharpConfigValue]

    def create_required_operation(
        self, target: TargetFileOrDirectoryType, scopes: set[Scope]
    ) -> AbstractOperation | None:
        return self._create_child_required_operation(target=target, scopes=scopes)

    def get_allowed_options(self) -> list[type[AbstractConfigOption]]:
        from wexample_filestate_csharp.option.csharp.check_members_order_option import (
            CheckMembersOrderOption,
        )
        from wexample_filestate_csharp.option.csharp.order_members_option import (
            OrderMembersOption,
        )
        from wexample_filestate_csharp.option.csharp.order_razor_members_option import (
            OrderRazorMembersOption,
        )

        return [
            CheckMembersOrderOption,
            OrderMembersOption,
            OrderRazorMembersOption,
        ]

    def set_value(self, raw_value: Any) -> None:
        # Convert list form to dict form for consistency
        if isinstance(raw_value, list):
            raw_value = {option_name: True for option_name in raw_value}

        super().set_value(raw_value=raw_value)
