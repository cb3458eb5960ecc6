"""指标卡片组件"""
import streamlit as st

from utils.formatters import fmt_amount, fmt_percent, fmt_rate


def render_loan_metrics(summary: dict):
    """渲染单一还款方式的摘要指标"""
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Primeira parcela", fmt_amount(summary["first_installment"]))
    with c2:
        st.metric("Última parcela", fmt_amount(summary["last_installment"]))
    with c3:
        st.metric("Total de juros", fmt_amount(summary["total_interest"]))
    with c4:
        st.metric("Custo efetivo anual", fmt_rate(summary.get("effective_annual_rate", 0)))


def render_growth_metrics(projection):
    """渲染投资预测汇总"""
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Valor final", fmt_amount(projection.total))
    with c2:
        st.metric("Capital investido", fmt_amount(projection.total_invested))
    with c3:
        st.metric("Juros recebidos", fmt_amount(projection.total_interest))
    with c4:
        st.metric(
            "Taxa mensal equivalente",
            fmt_rate(projection.monthly_rate_percent),
            delta=f"{fmt_percent(projection.yield_on_cost)} do investido",
        )
