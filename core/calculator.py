"""核心计算：按还款日逐期计息、分配本金利息"""
import logging
from decimal import Context, Decimal, localcontext
from typing import List, Sequence

import pandas as pd

from config.constants import AMORTIZATION_SCHEDULE_COLUMNS, PaymentType
from config.settings import AMOUNT_PRECISION, DECIMAL_PRECISION
from core.errors import EmptyScheduleError, InvalidConfigurationError, UnsupportedPaymentTypeError
from core.payment_rules import rule_for
from core.schedule_generator import build_schedule_items, enforce_bullet
from core.term_calculator import calculate_term
from data_manager.data_validator import validate_loan, validate_payment_schedules
from data_manager.schema import AmortizationRecord, AmortizationScheduleItem, Loan, PaymentSchedule, ScheduleSummary
from utils.formatters import round_amount

logger = logging.getLogger(__name__)


def _subtract_exact(minuend: Decimal, subtrahend: Decimal) -> Decimal:
    """不经舍入的减法：剩余本金逐期精确递减，本金合计与贷款本金严格相等"""
    exponent = min(minuend.as_tuple().exponent, subtrahend.as_tuple().exponent)
    digits = max(minuend.adjusted(), subtrahend.adjusted()) - exponent + 2
    return Context(prec=max(digits, DECIMAL_PRECISION)).subtract(minuend, subtrahend)


def calculate_payments(
    loan: Loan,
    items: List[AmortizationScheduleItem],
) -> List[AmortizationScheduleItem]:
    """
    按日期顺序单次遍历，逐期写入 interest / principal / remaining_balance

    Args:
        loan: 贷款
        items: 已排序、已保证以 bullet 结束的还款列表

    Returns:
        同一个列表（各期字段已填充）
    """
    last_date = loan.interest_accrual_start_date
    accrued_interest = Decimal(0)
    remaining_balance = loan.amount

    for item in items:
        term = calculate_term(last_date, item.date, loan.accrual_basis)
        accrued_interest += remaining_balance * loan.interest_rate * term

        allocation = rule_for(item.schedule).apply(accrued_interest, remaining_balance)
        item.interest = allocation.interest
        item.principal = allocation.principal
        accrued_interest = allocation.accrued_interest

        remaining_balance = _subtract_exact(remaining_balance, item.principal)
        item.remaining_balance = remaining_balance
        last_date = item.date

    return items


def generate_amortization_schedule(
    loan: Loan,
    payment_schedules: Sequence[PaymentSchedule],
) -> List[AmortizationRecord]:
    """生成摊还计划：还款日生成 -> 合并排序 -> 补齐一次性结清 -> 逐期计算"""
    if not payment_schedules:
        raise EmptyScheduleError("至少需要一个还款计划")

    ok, msg = validate_loan(loan)
    if not ok:
        raise InvalidConfigurationError(msg)
    ok, msg = validate_payment_schedules(payment_schedules)
    if not ok:
        raise InvalidConfigurationError(msg)

    for schedule in payment_schedules:
        if schedule.payment_type == PaymentType.CUSTOM:
            raise UnsupportedPaymentTypeError("自定义还款方式尚未实现")

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        items = enforce_bullet(build_schedule_items(payment_schedules))
        calculate_payments(loan, items)

    logger.debug("摊还计划共 %d 期，结清日 %s", len(items), items[-1].date)
    return [item.to_record() for item in items]


def summarize_schedule(items: Sequence[AmortizationRecord]) -> ScheduleSummary:
    """汇总：期数、总利息、总本金、总还款、结清日"""
    total_interest = sum((item.interest for item in items), Decimal(0))
    total_principal = sum((item.principal for item in items), Decimal(0))
    return ScheduleSummary(
        payment_count=len(items),
        total_interest=total_interest,
        total_principal=total_principal,
        total_payment=total_interest + total_principal,
        payoff_date=items[-1].date if items else None,
    )


def schedule_to_dataframe(
    items: Sequence[AmortizationRecord],
    places: int = AMOUNT_PRECISION,
) -> pd.DataFrame:
    """转为展示用 DataFrame，金额在全部计算完成后才舍入"""
    records = [
        {
            "date": item.date.strftime("%Y-%m-%d"),
            "interest": float(round_amount(item.interest, places)),
            "principal": float(round_amount(item.principal, places)),
            "remaining_balance": float(round_amount(item.remaining_balance, places)),
        }
        for item in items
    ]
    return pd.DataFrame(records, columns=AMORTIZATION_SCHEDULE_COLUMNS)
