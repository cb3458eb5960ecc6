"""Plotly 图表工厂"""
from typing import Dict

import plotly.express as px
import plotly.graph_objects as go
import plotly.io as pio
import pandas as pd

from config.settings import COLORS
from utils.formatters import fmt_amount_short

# 自定义 Plotly 主题
pio.templates["finance_light"] = go.layout.Template(
    layout=go.Layout(
        font=dict(family="sans-serif", color="#333"),
        title_font=dict(size=20, color="#333"),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(
            gridcolor="#e0e0e0",
            linecolor="#e0e0e0",
            zerolinecolor="#e0e0e0",
            tickfont=dict(color="#666"),
            title_font=dict(color="#666"),
        ),
        yaxis=dict(
            gridcolor="#e0e0e0",
            linecolor="#e0e0e0",
            zerolinecolor="#e0e0e0",
            tickfont=dict(color="#666"),
            title_font=dict(color="#666"),
        ),
        legend=dict(
            font=dict(color="#666"),
            bgcolor="rgba(255,255,255,0.5)",
            bordercolor="#e0e0e0",
            borderwidth=1,
        ),
        colorway=px.colors.qualitative.Plotly,
    )
)

pio.templates.default = "finance_light"

_LINE_LAYOUT = dict(
    hovermode="x unified",
    margin=dict(t=60, b=60, l=60, r=20),
    height=400,
)


def create_composition_area(schedule: pd.DataFrame, title: str = "Composição da parcela") -> go.Figure:
    """每期本金/利息/保险堆叠面积图"""
    fig = go.Figure()
    parts = [
        ("principal_paid", "Amortização", COLORS["principal"]),
        ("interest", "Juros", COLORS["interest"]),
        ("insurance", "Seguro", COLORS["insurance"]),
    ]
    for col, name, color in parts:
        if col == "insurance" and not (schedule[col] > 0).any():
            continue
        fig.add_trace(go.Scatter(
            x=schedule["period"],
            y=schedule[col],
            mode="lines",
            name=name,
            stackgroup="installment",
            line=dict(color=color),
            hovertemplate="Mês %{x}<br>" + name + ": R$ %{y:,.2f}<extra></extra>",
        ))

    fig.update_layout(title=title, xaxis_title="Mês", yaxis_title="Valor (R$)", **_LINE_LAYOUT)
    return fig


def create_method_line(
    schedules: Dict[str, pd.DataFrame],
    y_col: str = "installment",
    title: str = "Evolução da parcela",
    y_label: str = "Valor (R$)",
) -> go.Figure:
    """多种还款方式叠加折线图，schedules 为 {名称: 计划表}"""
    fig = go.Figure()
    colors = [COLORS["sac"], COLORS["price"], COLORS["info"], COLORS["secondary"]]

    for i, (name, sch) in enumerate(schedules.items()):
        fig.add_trace(go.Scatter(
            x=sch["period"],
            y=sch[y_col],
            mode="lines",
            name=name,
            line=dict(color=colors[i % len(colors)], width=2),
            hovertemplate="Mês %{x}<br>R$ %{y:,.2f}<extra></extra>",
        ))

    fig.update_layout(title=title, xaxis_title="Mês", yaxis_title=y_label, **_LINE_LAYOUT)
    return fig


def create_cost_bar(comparison: Dict) -> go.Figure:
    """SAC / PRICE 总利息与总保险柱状图"""
    methods = ["SAC", "PRICE"]
    interest = [comparison["sac"]["total_interest"], comparison["price"]["total_interest"]]
    insurance = [comparison["sac"]["total_insurance"], comparison["price"]["total_insurance"]]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        name="Juros", x=methods, y=interest, marker_color=COLORS["interest"],
        text=[fmt_amount_short(v) for v in interest], textposition="inside",
    ))
    fig.add_trace(go.Bar(
        name="Seguro", x=methods, y=insurance, marker_color=COLORS["insurance"],
        text=[fmt_amount_short(v) for v in insurance], textposition="inside",
    ))
    fig.update_layout(
        title="Custo total do crédito",
        barmode="stack",
        yaxis_title="Valor (R$)",
        margin=dict(t=60, b=40, l=60, r=20),
        height=400,
    )
    return fig


def create_growth_area(growth: pd.DataFrame, title: str = "Evolução do patrimônio") -> go.Figure:
    """累计金额 vs 投入本金；横轴为年"""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=growth["period_fraction"],
        y=growth["amount"],
        mode="lines",
        name="Valor acumulado",
        fill="tozeroy",
        line=dict(color=COLORS["amount"], width=2),
        hovertemplate="Ano %{x:.1f}<br>R$ %{y:,.2f}<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=growth["period_fraction"],
        y=growth["invested"],
        mode="lines",
        name="Capital investido",
        line=dict(color=COLORS["invested"], width=2, dash="dash"),
        hovertemplate="Ano %{x:.1f}<br>R$ %{y:,.2f}<extra></extra>",
    ))

    fig.update_layout(title=title, xaxis_title="Anos", yaxis_title="Valor (R$)", **_LINE_LAYOUT)
    return fig
