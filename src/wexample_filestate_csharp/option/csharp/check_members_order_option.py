from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wexample_config.config_option.abstract_config_option import AbstractConfigOption
from wexample_filestate.enum.scopes import Scope
from wexample_filestate.operation.abstract_operation import AbstractOperation
from wexample_filestate.option.mixin.option_mixin import OptionMixin
from wexample_helpers.decorator.base_class import base_class

if TYPE_CHECKING:
    from wexample_filestate.const.types_state_items import TargetFileOrDirectoryType

    from wexample_filestate_csharp.common.formatting_result import FormattingResult

logger = logging.getLogger(__name__)


@base_class
class CheckMembersOrderOption(OptionMixin, AbstractConfigOption):
    def create_required_operation(
        self, target: TargetFileOrDirectoryType, scopes: set[Scope]
    ) -> AbstractOperation | None:
        del scopes  # unused

        if not self.is_true():
            return None

        result = self._check_target(target=target)
        if result is None:
            return None

        if result.parse_failed:
            logger.warning("Could not parse %s", target.get_path())
        for violation in result.violations:
            logger.info("%s:%s", target.get_path(), violation)

        # Reporting only, nothing to write.
        return None

    def get_description(self) -> str:
        return "Report C# members that are not in SA1201 order without modifying files"

    def _check_target(self, target: TargetFileOrDirectoryType) -> FormattingResult | None:
        from wexample_filestate_csharp.helpers.config import config_load_for_path
        from wexample_filestate_csharp.utils.csharp_member_order_utils import (
            check_members_order,
        )
        from wexample_filestate_csharp.utils.csharp_razor_utils import (
            check_razor_members_order,
            is_razor_file,
        )

        name = target.get_item_name()
        if not name.lower().endswith(".cs") and not is_razor_file(name):
            return None

        source = target.get_local_file().read()
        policy = config_load_for_path(target.get_path())
        if is_razor_file(name):
            return check_razor_members_order(source, policy)
        return check_members_order(source, policy)
