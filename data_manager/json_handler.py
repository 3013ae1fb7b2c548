"""
请求 JSON 解析

请求体格式与原 Web 接口一致：
    {
        "loan": {"accrualBasis": ..., "amount": ..., "interestRate": 10, "interestAccrualStartDate": "2001-01-01"},
        "paymentSchedules": [{"startDate": ..., "endDate": ..., "paymentFrequency": ..., "paymentType": ..., "paymentAmount": ...}]
    }

interestRate 为百分比，解析时除以 100。枚举字段接受整数编码、CamelCase 名称或小写值。
"""
import json
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Tuple, Type, Union

from config.constants import (
    ACCRUAL_BASIS_CODES,
    PAYMENT_FREQUENCY_CODES,
    PAYMENT_TYPE_CODES,
    AccrualBasis,
    PaymentFrequency,
    PaymentType,
)
from core.errors import InvalidConfigurationError
from data_manager.schema import Loan, PaymentSchedule
from utils.formatters import to_decimal


def _get(data: Dict, camel: str, snake: str, default=None, required: bool = True):
    """读取字段，兼容 camelCase 与 snake_case"""
    if camel in data:
        return data[camel]
    if snake in data:
        return data[snake]
    if required:
        raise InvalidConfigurationError(f"缺少字段: {camel}")
    return default


def _parse_date(value, field: str) -> date:
    """解析日期，支持 date 对象或 ISO 字符串（带时间部分的只取日期）"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError as exc:
            raise InvalidConfigurationError(f"{field} 日期格式错误: {value!r}") from exc
    raise InvalidConfigurationError(f"{field} 日期格式错误: {value!r}")


def _parse_decimal(value, field: str) -> Decimal:
    if value is None or isinstance(value, bool):
        raise InvalidConfigurationError(f"{field} 必须是数值: {value!r}")
    try:
        result = to_decimal(value)
    except ValueError as exc:
        raise InvalidConfigurationError(f"{field} 必须是数值: {value!r}") from exc
    if not result.is_finite():
        raise InvalidConfigurationError(f"{field} 必须是有限数值: {value!r}")
    return result


def _normalize(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


EnumType = Union[Type[AccrualBasis], Type[PaymentFrequency], Type[PaymentType]]


def _parse_enum(enum_cls: EnumType, codes: Dict[int, object], value, field: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if value in codes:
            return codes[value]
    elif isinstance(value, str):
        if value.strip().isdigit() and int(value) in codes:
            return codes[int(value)]
        key = _normalize(value.strip())
        for member in enum_cls:
            if key in (_normalize(member.value), _normalize(member.name)):
                return member
    raise InvalidConfigurationError(f"{field} 取值无效: {value!r}")


def parse_loan(data: Dict) -> Loan:
    rate_percent = _parse_decimal(_get(data, "interestRate", "interest_rate"), "interestRate")
    return Loan(
        accrual_basis=_parse_enum(
            AccrualBasis, ACCRUAL_BASIS_CODES,
            _get(data, "accrualBasis", "accrual_basis"), "accrualBasis",
        ),
        amount=_parse_decimal(_get(data, "amount", "amount"), "amount"),
        interest_rate=rate_percent / 100,
        interest_accrual_start_date=_parse_date(
            _get(data, "interestAccrualStartDate", "interest_accrual_start_date"),
            "interestAccrualStartDate",
        ),
    )


def parse_payment_schedule(data: Dict) -> PaymentSchedule:
    start_date = _parse_date(_get(data, "startDate", "start_date"), "startDate")
    end_value = _get(data, "endDate", "end_date", required=False)
    return PaymentSchedule(
        start_date=start_date,
        end_date=start_date if end_value is None else _parse_date(end_value, "endDate"),
        payment_frequency=_parse_enum(
            PaymentFrequency, PAYMENT_FREQUENCY_CODES,
            _get(data, "paymentFrequency", "payment_frequency"), "paymentFrequency",
        ),
        payment_type=_parse_enum(
            PaymentType, PAYMENT_TYPE_CODES,
            _get(data, "paymentType", "payment_type"), "paymentType",
        ),
        payment_amount=_parse_decimal(
            _get(data, "paymentAmount", "payment_amount", default=0, required=False),
            "paymentAmount",
        ),
    )


def parse_request(payload: Dict) -> Tuple[Loan, List[PaymentSchedule]]:
    """解析请求体，返回 (贷款, 还款计划列表)"""
    if not isinstance(payload, dict):
        raise InvalidConfigurationError("请求体必须是 JSON 对象")
    loan_data = _get(payload, "loan", "loan")
    schedules_data = _get(payload, "paymentSchedules", "payment_schedules")
    if not isinstance(loan_data, dict):
        raise InvalidConfigurationError("loan 必须是 JSON 对象")
    if not isinstance(schedules_data, list):
        raise InvalidConfigurationError("paymentSchedules 必须是数组")
    return parse_loan(loan_data), [parse_payment_schedule(s) for s in schedules_data]


def load_request(filepath: Path) -> Tuple[Loan, List[PaymentSchedule]]:
    """读取 JSON 文件；数值按 Decimal 解析"""
    with open(filepath, encoding="utf-8") as f:
        try:
            payload = json.load(f, parse_float=Decimal)
        except json.JSONDecodeError as exc:
            raise InvalidConfigurationError(f"JSON 格式错误: {exc}") from exc
    return parse_request(payload)
