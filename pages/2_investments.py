"""投资模拟：复利 + 安全提取率"""
import streamlit as st

from config.settings import DEFAULT_MONTHLY_COST, DEFAULT_WITHDRAWAL_RATE
from core.investment import capital_for_withdrawal, compound_growth, growth_frame, yearly_growth
from components.charts import create_growth_area
from components.forms import render_investment_form
from components.metrics import render_growth_metrics
from components.tables import render_yearly_growth_table
from utils.formatters import fmt_amount

st.set_page_config(page_title="Investimentos", page_icon="📈", layout="wide")
st.title("📈 Investimentos")


@st.cache_data
def _project(initial: float, monthly_contribution: float, yearly_rate: float, years: float):
    return compound_growth(initial, monthly_contribution, yearly_rate, years)


tab_growth, tab_freedom = st.tabs(["Juros compostos", "Independência financeira"])

with tab_growth:
    params = render_investment_form()
    projection = _project(
        params["initial"], params["monthly_contribution"], params["yearly_rate"], params["years"],
    )
    render_growth_metrics(projection)
    st.plotly_chart(create_growth_area(growth_frame(projection)), width='stretch')
    st.caption(
        "A linha tracejada representa o capital retirado do seu bolso. "
        "A diferença entre as curvas são os juros compostos trabalhando por você."
    )
    render_yearly_growth_table(yearly_growth(projection))

with tab_freedom:
    c1, c2 = st.columns(2)
    with c1:
        monthly_cost = st.number_input(
            "Custo de vida mensal (R$)", min_value=0.0, value=DEFAULT_MONTHLY_COST, step=500.0)
    with c2:
        withdrawal_rate = st.number_input(
            "Taxa de retirada anual (%)", min_value=0.1, max_value=20.0,
            value=DEFAULT_WITHDRAWAL_RATE, step=0.1, format="%.2f")

    capital = capital_for_withdrawal(monthly_cost, withdrawal_rate)
    st.metric("Capital necessário", fmt_amount(capital))
