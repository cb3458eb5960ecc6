"""Finanças Pessoais - 主入口"""
import logging

import streamlit as st

from config.settings import PAGE_TITLE, PAGE_ICON, LAYOUT, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
    initial_sidebar_state="expanded",
)

st.title(f"{PAGE_ICON} {PAGE_TITLE}")

st.markdown("""
Simuladores financeiros para planejar crédito e investimentos.

### Páginas

| Página | Função |
|------|------|
| 🏦 **Simulador de crédito** | Tabela SAC vs PRICE, seguro obrigatório, custo efetivo |
| 📈 **Investimentos** | Juros compostos com aportes mensais, capital para independência financeira |

### Convenções de cálculo

- **PRICE**: parcela fixa; taxa mensal = taxa anual / 12
- **SAC**: amortização constante; parcela decrescente
- **Seguro**: valor fixo mensal = valor financiado × taxa anual / 12, somado à parcela
- **Investimentos**: taxa mensal geométrica, aporte no início de cada mês
- **Independência financeira**: capital = custo mensal × 12 / taxa de retirada
""")

with st.sidebar:
    st.markdown("### Sobre")
    st.markdown("Finanças Pessoais v1.0")
