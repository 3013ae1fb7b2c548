"""页面组件测试（不启动 Streamlit）"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from datetime import date
from decimal import Decimal
import pandas as pd
from components.charts import build_amortization_chart
from components.forms import build_request, default_schedule_rows, SCHEDULE_EDITOR_COLUMNS
from config.constants import AccrualBasis, PaymentType, AMORTIZATION_SCHEDULE_COLUMNS
from core.calculator import generate_amortization_schedule, schedule_to_dataframe
from data_manager.json_handler import parse_request


def _loan_values():
    return {
        "accrual_basis": AccrualBasis.ACTUAL_ACTUAL.value,
        "amount": 1000.0,
        "interest_rate": 10.0,
        "interest_accrual_start_date": date(2001, 1, 1),
    }


def _rows():
    return pd.DataFrame([{
        "start_date": date(2001, 2, 1),
        "end_date": date(2001, 4, 1),
        "payment_frequency": "monthly",
        "payment_type": "level_payment",
        "payment_amount": 338.9,
    }], columns=SCHEDULE_EDITOR_COLUMNS)


class TestBuildRequest:
    def test_form_to_schedule(self):
        loan, schedules = parse_request(build_request(_loan_values(), _rows()))
        assert loan.interest_rate == Decimal("0.1")
        assert schedules[0].payment_amount == Decimal("338.9")
        items = generate_amortization_schedule(loan, schedules)
        assert [i.date for i in items] == [date(2001, 2, 1), date(2001, 3, 1), date(2001, 4, 1)]

    def test_skips_blank_rows(self):
        rows = pd.concat([_rows(), pd.DataFrame([{c: None for c in SCHEDULE_EDITOR_COLUMNS}])],
                         ignore_index=True)
        request = build_request(_loan_values(), rows)
        assert len(request["paymentSchedules"]) == 1

    def test_missing_end_date(self):
        rows = _rows()
        rows.loc[0, "end_date"] = None
        rows.loc[0, "payment_type"] = PaymentType.BULLET.value
        request = build_request(_loan_values(), rows)
        assert request["paymentSchedules"][0]["endDate"] is None

    def test_default_rows(self):
        rows = default_schedule_rows()
        assert list(rows.columns) == SCHEDULE_EDITOR_COLUMNS
        assert len(rows) == 1


class TestChart:
    def test_traces(self):
        loan, schedules = parse_request(build_request(_loan_values(), _rows()))
        df = schedule_to_dataframe(generate_amortization_schedule(loan, schedules))
        fig = build_amortization_chart(df)
        assert [t.name for t in fig.data] == ["本金", "利息", "剩余本金"]
        assert list(fig.data[2].y) == list(df["remaining_balance"])

    def test_empty(self):
        fig = build_amortization_chart(pd.DataFrame(columns=AMORTIZATION_SCHEDULE_COLUMNS))
        assert len(fig.data) == 0
