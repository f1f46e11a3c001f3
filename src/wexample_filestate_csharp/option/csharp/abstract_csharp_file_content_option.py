from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from wexample_filestate.option.abstract_file_content_option import (
    AbstractFileContentOption,
)
from wexample_helpers.decorator.base_class import base_class

if TYPE_CHECKING:
    from wexample_filestate.const.types_state_items import TargetFileOrDirectoryType

    from wexample_filestate_csharp.common.member_order_policy import (
        MemberOrderPolicy,
    )


@base_class
class AbstractCSharpFileContentOption(AbstractFileContentOption):
    """Base class for C# file content transformation options."""

    # Use ClassVar to avoid Pydantic treating it as a model field/private attr
    _file_extension: ClassVar[str] = ".cs"

    def _apply_content_change(self, target: TargetFileOrDirectoryType) -> str:
        src = target.get_local_file().read()
        if not self._handles_target(target):
            return src

        return self._transform_source(src, self._get_policy(target))

    def _get_policy(self, target: TargetFileOrDirectoryType) -> MemberOrderPolicy:
        """Policy from the .sa1201ierrc files found above the target."""
        from wexample_filestate_csharp.helpers.config import config_load_for_path

        return config_load_for_path(target.get_path())

    def _handles_target(self, target: TargetFileOrDirectoryType) -> bool:
        return target.get_item_name().lower().endswith(self._file_extension)

    def _transform_source(self, src: str, policy: MemberOrderPolicy) -> str:
        raise NotImplementedError
