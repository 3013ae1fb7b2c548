from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Union

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """转为 Decimal；float 先转 str，避免二进制误差带入"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"无法解析为数值: {value!r}") from exc


def round_amount(value: Decimal, places: int = 2) -> Decimal:
    """银行家舍入：Decimal('2.345') -> Decimal('2.34')"""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)


def fmt_amount(value: Decimal, places: int = 2) -> str:
    """格式化金额：Decimal('1234567.891') -> 1,234,567.89"""
    return f"{round_amount(value, places):,}"
