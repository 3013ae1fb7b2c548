"""日历运算：加月/加年按月末截断（如 1 月 31 日加一个月得 2 月最后一天）"""
import calendar
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta


def add_months(d: date, months: int) -> date:
    """日期加 N 个月"""
    return d + relativedelta(months=months)


def add_years(d: date, years: int) -> date:
    """日期加 N 年（2 月 29 日遇平年截断为 2 月 28 日）"""
    return d + relativedelta(years=years)


def add_weeks(d: date, weeks: int) -> date:
    return d + timedelta(weeks=weeks)


def whole_months_between(start: date, end: date) -> int:
    """start 到 end 之间的完整月数，满足 add_months(start, n) <= end"""
    delta = relativedelta(end, start)
    return delta.years * 12 + delta.months


def whole_years_between(start: date, end: date) -> int:
    """start 到 end 之间的完整年数，满足 add_years(start, n) <= end"""
    return relativedelta(end, start).years


def days_between(start: date, end: date) -> int:
    return (end - start).days


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365
