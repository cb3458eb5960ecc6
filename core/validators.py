"""参数校验

校验函数返回 (是否合法, 错误信息)，供表单和 CLI 直接展示；
计算引擎通过 ensure_valid 把不合法结果转换为 InvalidArgument。
"""
import math
from numbers import Integral, Real
from typing import Tuple

from core.errors import InvalidArgument


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def validate_loan_params(
    principal: float,
    yearly_rate: float,
    periods: int,
    yearly_insurance: float = 0.0,
) -> Tuple[bool, str]:
    """校验贷款参数"""
    if not _is_number(principal) or principal <= 0:
        return False, f"principal must be a positive number, got {principal!r}"

    if not _is_number(yearly_rate) or yearly_rate < 0:
        return False, f"yearly rate must be a non-negative number, got {yearly_rate!r}"

    if isinstance(periods, bool) or not isinstance(periods, Integral) or periods < 0:
        return False, f"periods must be a non-negative integer, got {periods!r}"

    if not _is_number(yearly_insurance) or yearly_insurance < 0:
        return False, f"insurance rate must be a non-negative number, got {yearly_insurance!r}"

    return True, ""


def validate_growth_params(
    initial: float,
    monthly_contribution: float,
    yearly_rate: float,
    years: float,
) -> Tuple[bool, str]:
    """校验投资参数；years == 0 合法（后续会被钳到下限）"""
    if not _is_number(initial) or initial < 0:
        return False, f"initial amount must be a non-negative number, got {initial!r}"

    if not _is_number(monthly_contribution) or monthly_contribution < 0:
        return False, f"monthly contribution must be a non-negative number, got {monthly_contribution!r}"

    if not _is_number(yearly_rate) or yearly_rate < 0:
        return False, f"yearly rate must be a non-negative number, got {yearly_rate!r}"

    if not _is_number(years) or years < 0:
        return False, f"years must be a non-negative number, got {years!r}"

    return True, ""


def validate_withdrawal_params(
    monthly_cost: float,
    withdrawal_rate: float,
) -> Tuple[bool, str]:
    """校验安全提取率参数"""
    if not _is_number(monthly_cost) or monthly_cost < 0:
        return False, f"monthly cost must be a non-negative number, got {monthly_cost!r}"

    if not _is_number(withdrawal_rate) or withdrawal_rate <= 0:
        return False, f"withdrawal rate must be a positive number, got {withdrawal_rate!r}"

    return True, ""


def ensure_valid(result: Tuple[bool, str]) -> None:
    ok, message = result
    if not ok:
        raise InvalidArgument(message)
