"""格式化表格组件"""
import pandas as pd
import streamlit as st

from utils.formatters import fmt_amount


def render_amortization_table(schedule: pd.DataFrame):
    """渲染还款计划表格"""
    if schedule.empty:
        st.info("Nenhuma parcela para exibir")
        return

    col_map = {
        "period": "Mês",
        "installment": "Parcela",
        "interest": "Juros",
        "principal_paid": "Amortização",
        "insurance": "Seguro",
        "balance": "Saldo devedor",
    }

    display_cols = [c for c in col_map if c in schedule.columns]
    display_df = schedule[display_cols].rename(columns=col_map)

    for col in ["Parcela", "Juros", "Amortização", "Seguro", "Saldo devedor"]:
        if col in display_df.columns:
            display_df[col] = display_df[col].apply(fmt_amount)

    if len(display_df) > 24:
        st.dataframe(display_df, width='stretch', height=600, hide_index=True)
    else:
        st.dataframe(display_df, width='stretch', hide_index=True)


def render_yearly_growth_table(yearly: pd.DataFrame):
    """渲染按年投资明细"""
    if yearly.empty:
        st.info("Sem dados de projeção")
        return

    display = pd.DataFrame({
        "Ano": yearly["period_fraction"].round(2),
        "Valor acumulado": yearly["amount"].apply(fmt_amount),
        "Capital investido": yearly["invested"].apply(fmt_amount),
        "Juros acumulados": yearly["interest_accrued"].apply(fmt_amount),
    })
    st.dataframe(display, width='stretch', hide_index=True)


def render_comparison_table(comparison_df: pd.DataFrame):
    """渲染 SAC / PRICE 对比表"""
    if comparison_df.empty:
        st.info("Sem dados de comparação")
        return

    display = comparison_df.copy()
    for col in display.columns:
        display[col] = [
            f"{value:.2f}%" if label.endswith("(%)") else fmt_amount(value)
            for label, value in display[col].items()
        ]
    st.dataframe(display, width='stretch')
