"""复利投资预测与安全提取率"""
import logging
import math
from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from config.constants import GROWTH_COLUMNS
from config.settings import DEFAULT_WITHDRAWAL_RATE, MIN_GROWTH_YEARS, MONTHS_PER_YEAR
from core.validators import (
    ensure_valid,
    validate_growth_params,
    validate_withdrawal_params,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrowthPoint:
    period: int
    period_fraction: float
    amount: float
    invested: float
    interest_accrued: float
    period_interest: float


@dataclass(frozen=True)
class GrowthProjection:
    total: float
    total_invested: float
    total_interest: float
    monthly_rate_percent: float
    yield_on_cost: float
    growth: Tuple[GrowthPoint, ...]


def geometric_monthly_rate(yearly_rate: float) -> float:
    """年利率(%) -> 几何月利率，(1 + m) ** 12 - 1 等于年利率"""
    if yearly_rate <= 0:
        return 0.0
    return (1 + yearly_rate / 100) ** (1 / MONTHS_PER_YEAR) - 1


def total_periods(years: float) -> int:
    """投资期数，期限先钳到下限再四舍五入（0.5 进位）"""
    safe_years = max(years, MIN_GROWTH_YEARS)
    return int(math.floor(safe_years * MONTHS_PER_YEAR + 0.5))


def compound_growth(
    initial: float,
    monthly_contribution: float,
    yearly_rate: float,
    years: float,
) -> GrowthProjection:
    """
    按月复利预测，每期期初追加投入后再计息。
    返回逐期数据（含第 0 期）及汇总。
    """
    ensure_valid(validate_growth_params(initial, monthly_contribution, yearly_rate, years))

    periods = total_periods(years)
    rate = geometric_monthly_rate(yearly_rate)
    logger.debug(
        "Compound growth: initial=%s contribution=%s rate=%s periods=%s",
        initial, monthly_contribution, yearly_rate, periods,
    )

    balance = initial
    invested = initial
    points = [GrowthPoint(
        period=0,
        period_fraction=0.0,
        amount=initial,
        invested=initial,
        interest_accrued=0.0,
        period_interest=0.0,
    )]

    for period in range(1, periods + 1):
        prev_balance = balance
        invested += monthly_contribution
        balance = (balance + monthly_contribution) * (1 + rate)
        points.append(GrowthPoint(
            period=period,
            period_fraction=period / MONTHS_PER_YEAR,
            amount=balance,
            invested=invested,
            interest_accrued=max(0.0, balance - invested),
            period_interest=balance - (prev_balance + monthly_contribution),
        ))

    return GrowthProjection(
        total=balance,
        total_invested=invested,
        total_interest=max(0.0, balance - invested),
        monthly_rate_percent=rate * 100,
        yield_on_cost=balance / invested if invested > 0 else 0.0,
        growth=tuple(points),
    )


def growth_frame(projection: GrowthProjection) -> pd.DataFrame:
    records = [
        {col: getattr(point, col) for col in GROWTH_COLUMNS}
        for point in projection.growth
    ]
    return pd.DataFrame(records, columns=GROWTH_COLUMNS)


def yearly_growth(projection: GrowthProjection) -> pd.DataFrame:
    """按年取样：第 0 期、每 12 期，以及最后一期"""
    df = growth_frame(projection)
    last = df["period"].max()
    mask = (df["period"] % MONTHS_PER_YEAR == 0) | (df["period"] == last)
    return df[mask].reset_index(drop=True)


def capital_for_withdrawal(
    monthly_cost: float,
    withdrawal_rate: float = DEFAULT_WITHDRAWAL_RATE,
) -> float:
    """按安全提取率覆盖月支出所需的本金"""
    ensure_valid(validate_withdrawal_params(monthly_cost, withdrawal_rate))
    return (monthly_cost * MONTHS_PER_YEAR) / (withdrawal_rate / 100)
