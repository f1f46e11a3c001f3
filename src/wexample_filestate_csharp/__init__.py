from __future__ import annotations

from .common.formatting_result import FormattingResult
from .common.member_order_policy import MemberOrderPolicy
from .common.violation import Violation
from .utils.csharp_member_order_utils import check_members_order, format_members_order

__all__ = [
    "FormattingResult",
    "MemberOrderPolicy",
    "Violation",
    "check_members_order",
    "format_members_order",
]
