"""表单组件"""
import streamlit as st

from config.constants import AmortizationMethod
from config.settings import (
    DEFAULT_LOAN_AMOUNT, DEFAULT_LOAN_RATE, DEFAULT_LOAN_MONTHS, DEFAULT_INSURANCE_RATE,
    DEFAULT_INITIAL_INVESTMENT, DEFAULT_MONTHLY_CONTRIBUTION,
    DEFAULT_INVESTMENT_RATE, DEFAULT_INVESTMENT_YEARS,
)


def render_loan_form(key_prefix: str = "loan") -> dict:
    """渲染信贷模拟参数，参数变化即重算，不需要提交按钮"""
    c1, c2 = st.columns(2)
    with c1:
        amount = st.number_input(
            "Valor do financiamento (R$)", min_value=1000.0, value=DEFAULT_LOAN_AMOUNT,
            step=10000.0, key=f"{key_prefix}_amount")
        months = st.number_input(
            "Prazo (meses)", min_value=1, max_value=600, value=DEFAULT_LOAN_MONTHS,
            key=f"{key_prefix}_months")
    with c2:
        rate = st.number_input(
            "Taxa de juros anual (%)", min_value=0.0, max_value=100.0,
            value=DEFAULT_LOAN_RATE, step=0.1, format="%.2f",
            key=f"{key_prefix}_rate")
        insurance_rate = st.number_input(
            "Seguro obrigatório (% a.a.)", min_value=0.0, max_value=20.0,
            value=DEFAULT_INSURANCE_RATE, step=0.1, format="%.2f",
            key=f"{key_prefix}_insurance")

    method = st.radio(
        "Sistema de amortização",
        options=[m.value for m in AmortizationMethod],
        format_func=lambda x: AmortizationMethod(x).label,
        horizontal=True,
        key=f"{key_prefix}_method",
    )

    return {
        "principal": float(amount),
        "yearly_rate": float(rate),
        "periods": int(months),
        "yearly_insurance": float(insurance_rate),
        "method": method,
    }


def render_investment_form(key_prefix: str = "invest") -> dict:
    """渲染投资模拟参数"""
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        initial = st.number_input(
            "Aporte inicial (R$)", min_value=0.0, value=DEFAULT_INITIAL_INVESTMENT,
            step=1000.0, key=f"{key_prefix}_initial")
    with c2:
        monthly = st.number_input(
            "Aporte mensal (R$)", min_value=0.0, value=DEFAULT_MONTHLY_CONTRIBUTION,
            step=100.0, key=f"{key_prefix}_monthly")
    with c3:
        rate = st.number_input(
            "Rentabilidade anual (%)", min_value=0.0, max_value=100.0,
            value=DEFAULT_INVESTMENT_RATE, step=0.1, format="%.2f",
            key=f"{key_prefix}_rate")
    with c4:
        years = st.number_input(
            "Período (anos)", min_value=0.0, max_value=80.0,
            value=DEFAULT_INVESTMENT_YEARS, step=0.5,
            key=f"{key_prefix}_years")

    return {
        "initial": float(initial),
        "monthly_contribution": float(monthly),
        "yearly_rate": float(rate),
        "years": float(years),
    }
