"""SAC vs PRICE 对比"""
from typing import Dict

import pandas as pd

from config.constants import AmortizationMethod, SUMMARY_LABELS
from core.calculator import calc_irr, generate_schedule, summarize_schedule


def compare_methods(
    principal: float,
    yearly_rate: float,
    periods: int,
    yearly_insurance: float = 0.0,
) -> Dict:
    """对比两种还款方式；interest_saved 为选 SAC 相对 PRICE 少付的利息"""
    result = {}
    for method in AmortizationMethod:
        rows = generate_schedule(method, principal, yearly_rate, periods, yearly_insurance)
        summary = summarize_schedule(rows, principal, yearly_insurance)
        summary["effective_annual_rate"] = calc_irr(principal, [r.installment for r in rows])
        summary["schedule"] = rows
        result[method.value] = summary

    result["interest_saved"] = (
        result[AmortizationMethod.PRICE.value]["total_interest"]
        - result[AmortizationMethod.SAC.value]["total_interest"]
    )
    return result


def comparison_frame(comparison: Dict) -> pd.DataFrame:
    """对比结果转表格，行为指标、列为还款方式"""
    data = {}
    for method in AmortizationMethod:
        summary = comparison[method.value]
        data[method.label] = {label: summary[key] for key, label in SUMMARY_LABELS.items()}
    return pd.DataFrame(data)
