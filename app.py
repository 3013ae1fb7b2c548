"""贷款摊还计划计算器 - 主入口"""
import streamlit as st

from components.charts import build_amortization_chart
from components.forms import build_request, render_loan_form, render_payment_schedule_editor
from components.tables import render_amortization_table, render_summary_metrics
from config.constants import PaymentFrequency, PaymentType
from config.settings import PAGE_TITLE, PAGE_ICON, LAYOUT
from core.calculator import generate_amortization_schedule, schedule_to_dataframe, summarize_schedule
from core.errors import AmortizationError
from data_manager.json_handler import parse_request
from utils.logging_config import setup_logging

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
)

setup_logging()

st.title(f"{PAGE_ICON} {PAGE_TITLE}")

loan_values = render_loan_form()
schedule_rows = render_payment_schedule_editor()

st.caption("还款频率：" + "，".join(f"{e.value} = {e.label}" for e in PaymentFrequency))
st.caption("还款方式：" + "，".join(f"{e.value} = {e.label}" for e in PaymentType))
st.caption(
    "未指定一次性结清（bullet）时，最后一个还款日自动改为一次性结清全部剩余本金；"
    "本金比例（principal_percentage）填 0-1 之间的小数。"
)

if st.button("生成摊还计划", type="primary"):
    try:
        loan, payment_schedules = parse_request(build_request(loan_values, schedule_rows))
        items = generate_amortization_schedule(loan, payment_schedules)
    except AmortizationError as exc:
        st.error(str(exc))
    else:
        schedule = schedule_to_dataframe(items)
        render_summary_metrics(summarize_schedule(items))
        st.plotly_chart(build_amortization_chart(schedule), width='stretch')
        render_amortization_table(schedule)
