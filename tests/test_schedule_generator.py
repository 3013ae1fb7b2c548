"""还款日期生成与一次性结清测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from datetime import date
from decimal import Decimal
import pytest
from core.schedule_generator import build_schedule_items, enforce_bullet, generate_payment_dates
from core.errors import EmptyScheduleError, InvalidConfigurationError
from config.constants import PaymentFrequency, PaymentType
from data_manager.schema import PaymentSchedule


def _schedule(start, end=None, frequency=PaymentFrequency.ANNUAL,
              payment_type=PaymentType.INTEREST_ONLY, amount=0):
    return PaymentSchedule(
        start_date=start,
        end_date=end or date(2001, 1, 1),
        payment_frequency=frequency,
        payment_type=payment_type,
        payment_amount=Decimal(amount),
    )


class TestGeneratePaymentDates:
    """各频率生成的日期"""

    @pytest.mark.parametrize("frequency,end,expected", [
        (PaymentFrequency.ANNUAL, date(2003, 1, 1),
         [date(2001, 1, 1), date(2002, 1, 1), date(2003, 1, 1)]),
        (PaymentFrequency.SEMIANNUAL, date(2002, 1, 1),
         [date(2001, 1, 1), date(2001, 7, 1), date(2002, 1, 1)]),
        (PaymentFrequency.QUARTERLY, date(2001, 7, 1),
         [date(2001, 1, 1), date(2001, 4, 1), date(2001, 7, 1)]),
        (PaymentFrequency.MONTHLY, date(2001, 3, 1),
         [date(2001, 1, 1), date(2001, 2, 1), date(2001, 3, 1)]),
        (PaymentFrequency.WEEKLY, date(2001, 1, 15),
         [date(2001, 1, 1), date(2001, 1, 8), date(2001, 1, 15)]),
    ])
    def test_frequency(self, frequency, end, expected):
        dates = generate_payment_dates(_schedule(date(2001, 1, 1), end, frequency))
        assert dates == expected

    def test_end_date_between_steps(self):
        """结束日不在步长上时，最后一期不超过结束日"""
        dates = generate_payment_dates(
            _schedule(date(2001, 1, 1), date(2001, 3, 1), PaymentFrequency.WEEKLY))
        # 59 天 // 7 + 1
        assert len(dates) == 9
        assert dates[-1] == date(2001, 2, 26)

    def test_month_end_clamping_carries_forward(self):
        dates = generate_payment_dates(
            _schedule(date(2001, 1, 31), date(2001, 4, 30), PaymentFrequency.MONTHLY))
        assert dates == [date(2001, 1, 31), date(2001, 2, 28), date(2001, 3, 28), date(2001, 4, 28)]

    def test_leap_day_annual(self):
        dates = generate_payment_dates(
            _schedule(date(2000, 2, 29), date(2002, 3, 1), PaymentFrequency.ANNUAL))
        assert dates == [date(2000, 2, 29), date(2001, 2, 28), date(2002, 2, 28)]

    def test_bullet_frequency_ignores_end_date(self):
        dates = generate_payment_dates(
            _schedule(date(2001, 2, 1), date(2005, 1, 1), PaymentFrequency.BULLET))
        assert dates == [date(2001, 2, 1)]

    def test_bullet_payment_type_single_date(self):
        """还款方式为 bullet 时同样只生成一期，即使结束日早于起始日"""
        dates = generate_payment_dates(
            _schedule(date(2001, 3, 1), date(2001, 1, 1), PaymentFrequency.ANNUAL, PaymentType.BULLET))
        assert dates == [date(2001, 3, 1)]

    def test_start_after_end_is_empty(self):
        dates = generate_payment_dates(
            _schedule(date(2001, 3, 1), date(2001, 1, 1), PaymentFrequency.MONTHLY))
        assert dates == []

    def test_iteration_guard(self):
        schedule = _schedule(date(2001, 1, 1), date(2100, 1, 1), PaymentFrequency.WEEKLY)
        with pytest.raises(InvalidConfigurationError):
            generate_payment_dates(schedule, max_dates=100)


class TestBuildScheduleItems:
    def test_interleaves_schedules_by_date(self):
        annual = _schedule(date(2001, 1, 1), date(2002, 1, 1), PaymentFrequency.ANNUAL)
        semiannual = _schedule(date(2001, 3, 1), date(2002, 3, 1), PaymentFrequency.SEMIANNUAL)
        items = build_schedule_items([annual, semiannual])
        assert [i.date for i in items] == [
            date(2001, 1, 1), date(2001, 3, 1), date(2001, 9, 1), date(2002, 1, 1), date(2002, 3, 1),
        ]
        assert items[0].schedule is annual
        assert items[1].schedule is semiannual

    def test_same_date_keeps_input_order(self):
        first = _schedule(date(2001, 1, 1), date(2001, 1, 1), payment_type=PaymentType.LEVEL_PRINCIPAL)
        second = _schedule(date(2001, 1, 1), date(2001, 1, 1), payment_type=PaymentType.PRINCIPAL_ONLY)
        items = build_schedule_items([first, second])
        assert [i.schedule for i in items] == [first, second]


class TestEnforceBullet:
    """保证以一期 bullet 结束"""

    def test_adds_bullet_replacing_last_payment(self):
        schedule = _schedule(date(2001, 2, 1), date(2001, 4, 1), PaymentFrequency.MONTHLY,
                             PaymentType.LEVEL_PAYMENT, 100)
        items = enforce_bullet(build_schedule_items([schedule]))
        assert [i.date for i in items] == [date(2001, 2, 1), date(2001, 3, 1), date(2001, 4, 1)]
        assert items[-1].schedule.payment_type == PaymentType.BULLET
        assert all(i.schedule is schedule for i in items[:-1])

    def test_drops_payments_on_and_after_bullet(self):
        monthly = _schedule(date(2001, 2, 1), date(2001, 6, 1), PaymentFrequency.MONTHLY,
                            PaymentType.LEVEL_PAYMENT, 100)
        bullet = _schedule(date(2001, 3, 1), payment_type=PaymentType.BULLET)
        items = enforce_bullet(build_schedule_items([monthly, bullet]))
        assert [i.date for i in items] == [date(2001, 2, 1), date(2001, 3, 1)]
        assert items[-1].schedule is bullet

    def test_earliest_bullet_wins(self):
        early = _schedule(date(2001, 3, 1), payment_type=PaymentType.BULLET)
        late = _schedule(date(2001, 5, 1), payment_type=PaymentType.BULLET)
        monthly = _schedule(date(2001, 1, 1), date(2001, 12, 1), PaymentFrequency.MONTHLY)
        items = enforce_bullet(build_schedule_items([late, monthly, early]))
        bullets = [i for i in items if i.schedule.payment_type == PaymentType.BULLET]
        assert bullets == [items[-1]]
        assert items[-1].schedule is early
        assert [i.date for i in items] == [date(2001, 1, 1), date(2001, 2, 1), date(2001, 3, 1)]

    def test_empty_items(self):
        with pytest.raises(EmptyScheduleError):
            enforce_bullet([])
