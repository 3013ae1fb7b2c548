"""表单组件"""
from datetime import date

import pandas as pd
import streamlit as st
from dateutil.relativedelta import relativedelta

from config.constants import AccrualBasis, PaymentFrequency, PaymentType
from config.settings import DEFAULT_INTEREST_RATE, DEFAULT_LOAN_AMOUNT, DEFAULT_PAYMENT_AMOUNT

SCHEDULE_EDITOR_COLUMNS = [
    "start_date", "end_date", "payment_frequency", "payment_type", "payment_amount",
]


def default_schedule_rows() -> pd.DataFrame:
    """新建还款计划默认一行：一年内每年等额还款"""
    today = date.today()
    return pd.DataFrame([{
        "start_date": today,
        "end_date": today + relativedelta(years=1),
        "payment_frequency": PaymentFrequency.ANNUAL.value,
        "payment_type": PaymentType.LEVEL_PAYMENT.value,
        "payment_amount": DEFAULT_PAYMENT_AMOUNT,
    }], columns=SCHEDULE_EDITOR_COLUMNS)


def render_loan_form(key_prefix: str = "loan") -> dict:
    """渲染贷款信息输入，返回表单数据 dict（利率为百分比）"""
    st.subheader("贷款信息")
    c1, c2 = st.columns(2)
    with c1:
        amount = st.number_input(
            "贷款本金", min_value=0.0, value=DEFAULT_LOAN_AMOUNT, step=1000.0,
            key=f"{key_prefix}_amount",
        )
        interest_rate = st.number_input(
            "年利率 (%)", min_value=0.0, value=DEFAULT_INTEREST_RATE, step=0.05,
            format="%.4f", key=f"{key_prefix}_rate",
        )
    with c2:
        accrual_basis = st.selectbox(
            "计息基准",
            options=[e.value for e in AccrualBasis],
            format_func=lambda v: AccrualBasis(v).label,
            index=2,
            key=f"{key_prefix}_basis",
        )
        start_date = st.date_input("计息起始日", value=date.today(), key=f"{key_prefix}_start")

    return {
        "accrual_basis": accrual_basis,
        "amount": amount,
        "interest_rate": interest_rate,
        "interest_accrual_start_date": start_date,
    }


def render_payment_schedule_editor(key: str = "payment_schedules") -> pd.DataFrame:
    """渲染可编辑的还款计划表，可增删行"""
    st.subheader("还款计划")
    return st.data_editor(
        default_schedule_rows(),
        num_rows="dynamic",
        width='stretch',
        key=key,
        column_config={
            "start_date": st.column_config.DateColumn("首次还款日", required=True),
            "end_date": st.column_config.DateColumn("结束日"),
            "payment_frequency": st.column_config.SelectboxColumn(
                "还款频率", options=[e.value for e in PaymentFrequency], required=True,
            ),
            "payment_type": st.column_config.SelectboxColumn(
                "还款方式", options=[e.value for e in PaymentType], required=True,
            ),
            "payment_amount": st.column_config.NumberColumn("还款金额/比例", min_value=0.0),
        },
    )


def build_request(loan_values: dict, schedule_rows: pd.DataFrame) -> dict:
    """表单数据转为请求体，格式同 JSON 接口"""
    schedules = []
    for _, row in schedule_rows.iterrows():
        if pd.isna(row.get("start_date")):
            continue
        end_date = row.get("end_date")
        amount = row.get("payment_amount")
        schedules.append({
            "startDate": pd.Timestamp(row["start_date"]).date().isoformat(),
            "endDate": None if pd.isna(end_date) else pd.Timestamp(end_date).date().isoformat(),
            "paymentFrequency": row["payment_frequency"],
            "paymentType": row["payment_type"],
            "paymentAmount": 0 if pd.isna(amount) else str(amount),
        })
    return {
        "loan": {
            "accrualBasis": loan_values["accrual_basis"],
            "amount": str(loan_values["amount"]),
            "interestRate": str(loan_values["interest_rate"]),
            "interestAccrualStartDate": loan_values["interest_accrual_start_date"].isoformat(),
        },
        "paymentSchedules": schedules,
    }
