"""Plotly 图表工厂"""
import plotly.graph_objects as go
import pandas as pd

from config.settings import COLORS


def build_amortization_chart(schedule: pd.DataFrame) -> go.Figure:
    """每期本金/利息堆叠柱状图 + 剩余本金折线（右轴）"""
    fig = go.Figure()
    if schedule.empty:
        fig.update_layout(title="暂无摊还计划数据")
        return fig

    x = schedule["date"]
    fig.add_trace(go.Bar(
        x=x, y=schedule["principal"], name="本金",
        marker_color=COLORS["principal"],
    ))
    fig.add_trace(go.Bar(
        x=x, y=schedule["interest"], name="利息",
        marker_color=COLORS["interest"],
    ))
    fig.add_trace(go.Scatter(
        x=x, y=schedule["remaining_balance"], name="剩余本金",
        mode="lines+markers", line=dict(color=COLORS["balance"], width=2),
        yaxis="y2",
    ))

    fig.update_layout(
        title="摊还计划",
        barmode="stack",
        xaxis_title="还款日",
        yaxis=dict(title="每期还款"),
        yaxis2=dict(title="剩余本金", overlaying="y", side="right", showgrid=False),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    return fig
