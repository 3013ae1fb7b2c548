"""
还款日期生成

每个还款计划按频率生成候选还款日 -> 合并后按日期排序 -> 保证有且只有一期
一次性结清（bullet），并丢弃结清日当天及之后的其他还款。
"""
import logging
from datetime import date
from decimal import Decimal
from typing import List, Sequence

from config.constants import FREQUENCY_STEPS, PaymentFrequency, PaymentType
from config.settings import MAX_PAYMENT_DATES
from core.errors import EmptyScheduleError, InvalidConfigurationError
from data_manager.data_validator import is_single_payment
from data_manager.schema import AmortizationScheduleItem, PaymentSchedule
from utils.date_utils import add_months, add_weeks

logger = logging.getLogger(__name__)


def _next_date(current: date, frequency: PaymentFrequency) -> date:
    """逐期推进，月末截断会延续到后续各期（1/31 -> 2/28 -> 3/28）"""
    months, weeks = FREQUENCY_STEPS[frequency]
    if months:
        return add_months(current, months)
    return add_weeks(current, weeks)


def generate_payment_dates(
    schedule: PaymentSchedule,
    max_dates: int = MAX_PAYMENT_DATES,
) -> List[date]:
    """按还款计划生成递增的还款日期列表，start_date > end_date 时为空"""
    if is_single_payment(schedule):
        return [schedule.start_date]

    try:
        frequency = PaymentFrequency(schedule.payment_frequency)
    except ValueError as exc:
        raise InvalidConfigurationError(f"无效的还款频率: {schedule.payment_frequency}") from exc

    dates = []
    current = schedule.start_date
    while current <= schedule.end_date:
        if len(dates) >= max_dates:
            raise InvalidConfigurationError(
                f"还款计划 {schedule.start_date} ~ {schedule.end_date} 生成的日期超过 {max_dates} 个"
            )
        dates.append(current)
        current = _next_date(current, frequency)

    logger.debug("还款计划 %s ~ %s (%s) 生成 %d 个日期",
                 schedule.start_date, schedule.end_date, frequency.value, len(dates))
    return dates


def build_schedule_items(schedules: Sequence[PaymentSchedule]) -> List[AmortizationScheduleItem]:
    """所有还款计划的还款日合并，按日期稳定排序（同日按计划的输入顺序）"""
    items = [
        AmortizationScheduleItem(date=d, schedule=schedule)
        for schedule in schedules
        for d in generate_payment_dates(schedule)
    ]
    return sorted(items, key=lambda item: item.date)


def _is_bullet(item: AmortizationScheduleItem) -> bool:
    return item.schedule.payment_type == PaymentType.BULLET


def enforce_bullet(items: List[AmortizationScheduleItem]) -> List[AmortizationScheduleItem]:
    """
    保证计划以一期一次性结清结束

    没有 bullet 时，在最后一个还款日补一期 bullet；有多期 bullet 时以最早的为准。
    只保留结清日之前的还款和这一期 bullet 本身。

    Args:
        items: 已按日期排序的候选还款

    Returns:
        新的列表，最后一项为 bullet
    """
    if not items:
        raise EmptyScheduleError("没有任何还款日期，无法生成摊还计划")

    bullet = next((item for item in items if _is_bullet(item)), None)
    if bullet is None:
        last_date = max(item.date for item in items)
        bullet = AmortizationScheduleItem(
            date=last_date,
            schedule=PaymentSchedule(
                start_date=last_date,
                end_date=last_date,
                payment_frequency=PaymentFrequency.BULLET,
                payment_type=PaymentType.BULLET,
                payment_amount=Decimal(0),
            ),
        )
        logger.debug("未指定一次性结清，自动在 %s 补充", last_date)

    kept = [item for item in items if item.date < bullet.date]
    dropped = sum(1 for item in items if item.date >= bullet.date and item is not bullet)
    kept.append(bullet)

    logger.debug("结清日 %s，丢弃 %d 期还款", bullet.date, dropped)
    return kept
