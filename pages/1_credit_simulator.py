"""信贷模拟：SAC vs PRICE"""
import streamlit as st

from config.constants import AmortizationMethod
from core.calculator import schedule_frame
from core.comparison import compare_methods, comparison_frame
from components.charts import create_composition_area, create_cost_bar, create_method_line
from components.forms import render_loan_form
from components.metrics import render_loan_metrics
from components.tables import render_amortization_table, render_comparison_table
from utils.formatters import fmt_amount, fmt_months

st.set_page_config(page_title="Simulador de crédito", page_icon="🏦", layout="wide")
st.title("🏦 Simulador de crédito")


@st.cache_data
def _compare(principal: float, yearly_rate: float, periods: int, yearly_insurance: float):
    return compare_methods(principal, yearly_rate, periods, yearly_insurance)


params = render_loan_form()
comparison = _compare(
    params["principal"], params["yearly_rate"], params["periods"], params["yearly_insurance"],
)
active = comparison[params["method"]]
active_frame = schedule_frame(active["schedule"])

st.caption(
    f"{fmt_amount(params['principal'])} em {fmt_months(params['periods'])} "
    f"pelo sistema {AmortizationMethod(params['method']).label}"
)
render_loan_metrics(active)

if comparison["interest_saved"] > 0:
    st.success(f"O SAC economiza {fmt_amount(comparison['interest_saved'])} em juros em relação à PRICE.")

st.divider()

col1, col2 = st.columns(2)
with col1:
    st.plotly_chart(create_composition_area(active_frame), width='stretch')
with col2:
    frames = {
        "SAC": schedule_frame(comparison["sac"]["schedule"]),
        "PRICE": schedule_frame(comparison["price"]["schedule"]),
    }
    st.plotly_chart(create_method_line(frames), width='stretch')

col3, col4 = st.columns(2)
with col3:
    st.plotly_chart(
        create_method_line(frames, "balance", "Saldo devedor", "Saldo (R$)"),
        width='stretch',
    )
with col4:
    st.plotly_chart(create_cost_bar(comparison), width='stretch')

st.subheader("Comparativo")
render_comparison_table(comparison_frame(comparison))

with st.expander("Tabela de amortização"):
    render_amortization_table(active_frame)
    st.download_button(
        "Baixar CSV",
        active_frame.to_csv(index=False).encode("utf-8"),
        file_name=f"amortizacao_{params['method']}.csv",
        mime="text/csv",
    )
