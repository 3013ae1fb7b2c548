from datetime import date
from decimal import Decimal
from typing import Sequence, Tuple

from config.constants import AccrualBasis, PaymentFrequency, PaymentType
from data_manager.schema import Loan, PaymentSchedule


def is_single_payment(schedule: PaymentSchedule) -> bool:
    """一次性还款计划只在 start_date 生成一期，忽略 end_date"""
    return (
        schedule.payment_frequency == PaymentFrequency.BULLET
        or schedule.payment_type == PaymentType.BULLET
    )


def validate_loan(loan: Loan) -> Tuple[bool, str]:
    """校验贷款输入，返回 (是否合法, 错误信息)"""
    if loan.accrual_basis not in [e.value for e in AccrualBasis]:
        return False, f"无效的计息基准: {loan.accrual_basis}"

    if not isinstance(loan.amount, Decimal):
        return False, "贷款本金必须是 Decimal"
    if loan.amount < 0:
        return False, "贷款本金不能为负数"

    if not isinstance(loan.interest_rate, Decimal):
        return False, "利率必须是 Decimal"
    if loan.interest_rate < 0:
        return False, "利率不能为负数"

    if not isinstance(loan.interest_accrual_start_date, date):
        return False, "计息起始日必须是日期"

    return True, ""


def validate_payment_schedule(schedule: PaymentSchedule) -> Tuple[bool, str]:
    """校验单个还款计划"""
    if schedule.payment_frequency not in [e.value for e in PaymentFrequency]:
        return False, f"无效的还款频率: {schedule.payment_frequency}"

    if schedule.payment_type not in [e.value for e in PaymentType]:
        return False, f"无效的还款方式: {schedule.payment_type}"

    if not isinstance(schedule.start_date, date):
        return False, "还款起始日必须是日期"

    if not is_single_payment(schedule):
        if not isinstance(schedule.end_date, date):
            return False, "还款结束日必须是日期"
        if schedule.end_date < schedule.start_date:
            return False, "还款结束日不能早于起始日"

    if not isinstance(schedule.payment_amount, Decimal):
        return False, "还款金额必须是 Decimal"
    if schedule.payment_amount < 0:
        return False, "还款金额不能为负数"

    if schedule.payment_type == PaymentType.PRINCIPAL_PERCENTAGE:
        if schedule.payment_amount > 1:
            return False, "本金比例必须在 0-1 之间"

    return True, ""


def validate_payment_schedules(schedules: Sequence[PaymentSchedule]) -> Tuple[bool, str]:
    """校验还款计划列表，至少需要一个"""
    if not schedules:
        return False, "至少需要一个还款计划"

    for i, schedule in enumerate(schedules, start=1):
        ok, msg = validate_payment_schedule(schedule)
        if not ok:
            return False, f"第{i}个还款计划: {msg}"

    return True, ""
