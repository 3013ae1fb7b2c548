"""格式化表格组件"""
import pandas as pd
import streamlit as st

from data_manager.schema import ScheduleSummary
from utils.formatters import fmt_amount


def render_amortization_table(schedule: pd.DataFrame):
    """渲染摊还计划表格"""
    if schedule.empty:
        st.info("暂无摊还计划数据")
        return

    col_map = {
        "date": "还款日",
        "interest": "利息",
        "principal": "本金",
        "remaining_balance": "剩余本金",
    }
    display_df = schedule[list(col_map)].rename(columns=col_map)

    for col in ["利息", "本金", "剩余本金"]:
        display_df[col] = display_df[col].apply(lambda x: f"{x:,.2f}")

    if len(display_df) > 24:
        st.dataframe(display_df, width='stretch', height=600)
    else:
        st.dataframe(display_df, width='stretch')


def render_summary_metrics(summary: ScheduleSummary):
    """渲染汇总指标卡片"""
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("还款期数", f"{summary.payment_count}期")
    with c2:
        st.metric("总利息", fmt_amount(summary.total_interest))
    with c3:
        st.metric("总还款", fmt_amount(summary.total_payment))
    with c4:
        st.metric("结清日", str(summary.payoff_date or "-"))
