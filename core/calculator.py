"""核心计算：PRICE、SAC 还款计划、汇总、IRR"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd
from scipy import optimize

from config.constants import AmortizationMethod, AMORTIZATION_COLUMNS
from config.settings import MONTHS_PER_YEAR, RATE_PRECISION
from core.errors import InvalidArgument
from core.validators import ensure_valid, validate_loan_params

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AmortizationRow:
    """还款计划中的一期

    installment 含保险附加费；仅贷款部分满足
    installment - insurance == interest + principal_paid。
    """
    period: int
    installment: float
    interest: float
    principal_paid: float
    balance: float
    insurance: float = 0.0


def monthly_rate(yearly_rate: float) -> float:
    """名义年利率(%) -> 月利率（简单除以 12）"""
    return yearly_rate / 100 / MONTHS_PER_YEAR


def insurance_addon(principal: float, yearly_insurance: float) -> float:
    """每期固定保险附加费"""
    return (principal * yearly_insurance / 100) / MONTHS_PER_YEAR


def price_installment(principal: float, yearly_rate: float, periods: int) -> float:
    """PRICE：固定月供（不含保险）"""
    ensure_valid(validate_loan_params(principal, yearly_rate, periods))
    if periods == 0:
        return 0.0
    i = monthly_rate(yearly_rate)
    if i == 0:
        return principal / periods
    return principal * i / (1 - (1 + i) ** (-periods))


def amortization_price(
    principal: float,
    yearly_rate: float,
    periods: int,
    yearly_insurance: float = 0.0,
) -> List[AmortizationRow]:
    """PRICE（等额本息）还款计划，不做内部舍入"""
    ensure_valid(validate_loan_params(principal, yearly_rate, periods, yearly_insurance))
    logger.debug(
        "PRICE schedule: principal=%s rate=%s periods=%s insurance=%s",
        principal, yearly_rate, periods, yearly_insurance,
    )

    i = monthly_rate(yearly_rate)
    addon = insurance_addon(principal, yearly_insurance)
    installment = price_installment(principal, yearly_rate, periods)

    rows = []
    balance = principal
    for period in range(1, periods + 1):
        interest = balance * i
        principal_paid = installment - interest
        balance -= principal_paid
        rows.append(AmortizationRow(
            period=period,
            installment=installment + addon,
            interest=interest,
            principal_paid=principal_paid,
            balance=max(0.0, balance),
            insurance=addon,
        ))
    return rows


def amortization_sac(
    principal: float,
    yearly_rate: float,
    periods: int,
    yearly_insurance: float = 0.0,
) -> List[AmortizationRow]:
    """SAC（等额本金）还款计划：每期本金固定，月供逐期递减"""
    ensure_valid(validate_loan_params(principal, yearly_rate, periods, yearly_insurance))
    logger.debug(
        "SAC schedule: principal=%s rate=%s periods=%s insurance=%s",
        principal, yearly_rate, periods, yearly_insurance,
    )
    if periods == 0:
        return []

    i = monthly_rate(yearly_rate)
    addon = insurance_addon(principal, yearly_insurance)
    principal_paid = principal / periods

    rows = []
    balance = principal
    for period in range(1, periods + 1):
        interest = balance * i
        balance -= principal_paid
        rows.append(AmortizationRow(
            period=period,
            installment=principal_paid + interest + addon,
            interest=interest,
            principal_paid=principal_paid,
            balance=max(0.0, balance),
            insurance=addon,
        ))
    return rows


def generate_schedule(
    method: str,
    principal: float,
    yearly_rate: float,
    periods: int,
    yearly_insurance: float = 0.0,
) -> List[AmortizationRow]:
    """按还款方式生成计划"""
    try:
        method = AmortizationMethod(method)
    except ValueError:
        raise InvalidArgument(f"unknown amortization method: {method!r}") from None

    if method is AmortizationMethod.PRICE:
        return amortization_price(principal, yearly_rate, periods, yearly_insurance)
    return amortization_sac(principal, yearly_rate, periods, yearly_insurance)


def schedule_frame(rows: Sequence[AmortizationRow]) -> pd.DataFrame:
    """还款计划转 DataFrame，附带累计本金/利息列"""
    records = []
    cum_principal = 0.0
    cum_interest = 0.0
    for row in rows:
        cum_principal += row.principal_paid
        cum_interest += row.interest
        records.append({
            "period": row.period,
            "installment": row.installment,
            "interest": row.interest,
            "principal_paid": row.principal_paid,
            "insurance": row.insurance,
            "balance": row.balance,
            "cumulative_principal": cum_principal,
            "cumulative_interest": cum_interest,
        })
    return pd.DataFrame(records, columns=AMORTIZATION_COLUMNS)


def summarize_schedule(
    rows: Sequence[AmortizationRow],
    principal: float,
    yearly_insurance: float = 0.0,
) -> Dict:
    """汇总：总还款、总利息、总保险、首末期月供"""
    periods = len(rows)
    total_paid = sum(r.installment for r in rows)
    total_insurance = insurance_addon(principal, yearly_insurance) * periods
    return {
        "periods": periods,
        "total_paid": total_paid,
        "total_interest": sum(r.interest for r in rows),
        "total_insurance": total_insurance,
        "first_installment": rows[0].installment if rows else 0.0,
        "last_installment": rows[-1].installment if rows else 0.0,
    }


def calc_irr(principal: float, installments: Sequence[float]) -> float:
    """用 IRR 法计算实际年化成本(%)，含保险时高于名义利率"""
    if len(installments) == 0 or principal <= 0:
        return 0.0

    cash_flows = np.concatenate(([-principal], np.asarray(installments, dtype=float)))
    exponents = np.arange(len(cash_flows))

    def npv(rate):
        # 期数很长时区间端点的幂会溢出，按 inf / 0 参与求根即可
        with np.errstate(over="ignore", divide="ignore", under="ignore"):
            return float(np.sum(cash_flows / (1 + rate) ** exponents))

    try:
        monthly_irr = optimize.brentq(npv, -0.1, 1.0)
    except (ValueError, RuntimeError):
        logger.debug("IRR root not bracketed for principal=%s", principal)
        return 0.0
    annual_irr = (1 + monthly_irr) ** MONTHS_PER_YEAR - 1
    return round(annual_irr * 100, RATE_PRECISION)
