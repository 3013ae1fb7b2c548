"""
计息期限计算

把 [start, end] 区间拆成整年 + 余下部分，余下部分按计息基准折算成年：
    Actual/360      余下天数 / 360
    Actual/365      余下天数 / 365
    Actual/Actual   余下天数 / end 所在年份的天数
    30/360          (整月数 * 30 + min(余下天数, 30)) / 360

30/360 沿用“先整月、再零头天数”的拆分方式，不做月末日期的调整，
与教科书上的 30/360 (Bond Basis) 在月末日期上可能不同。
"""
from datetime import date
from decimal import Decimal

from config.constants import AccrualBasis
from core.errors import InvalidConfigurationError, InvalidDateRangeError
from utils.date_utils import (
    add_months,
    add_years,
    days_between,
    days_in_year,
    whole_months_between,
    whole_years_between,
)


def _thirty_360_days(start: date, end: date) -> int:
    months = whole_months_between(start, end)
    days = days_between(add_months(start, months), end)
    return months * 30 + min(days, 30)


def calculate_term(start: date, end: date, accrual_basis: AccrualBasis) -> Decimal:
    """计算 start 到 end 的计息年数（Decimal，不做舍入）"""
    if end < start:
        raise InvalidDateRangeError(f"计息结束日 {end} 早于起始日 {start}")

    years = whole_years_between(start, end)
    start_plus_years = add_years(start, years)
    days = Decimal(days_between(start_plus_years, end))

    if accrual_basis == AccrualBasis.ACTUAL_360:
        fraction = days / 360
    elif accrual_basis == AccrualBasis.ACTUAL_365:
        fraction = days / 365
    elif accrual_basis == AccrualBasis.ACTUAL_ACTUAL:
        fraction = days / days_in_year(end.year)
    elif accrual_basis == AccrualBasis.THIRTY_360:
        fraction = Decimal(_thirty_360_days(start_plus_years, end)) / 360
    else:
        raise InvalidConfigurationError(f"无效的计息基准: {accrual_basis}")

    return years + fraction
