"""
还款方式规则

每种还款方式一个类，只带自己需要的参数。apply() 输入当期累计应计利息和剩余本金，
返回本期利息、本期本金、以及结转到下一期的应计利息。本金一律不超过剩余本金。
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from config.constants import PaymentType
from core.errors import InvalidConfigurationError, UnsupportedPaymentTypeError
from data_manager.schema import PaymentSchedule

ZERO = Decimal(0)


@dataclass(frozen=True)
class PaymentAllocation:
    interest: Decimal
    principal: Decimal
    accrued_interest: Decimal  # 结转到下一期的应计利息


def _cap_principal(requested: Decimal, remaining_balance: Decimal) -> Decimal:
    return min(requested, remaining_balance)


@dataclass(frozen=True)
class Bullet:
    """一次性结清：利息全付，本金全还"""

    def apply(self, accrued_interest: Decimal, remaining_balance: Decimal) -> PaymentAllocation:
        return PaymentAllocation(accrued_interest, remaining_balance, ZERO)


@dataclass(frozen=True)
class InterestOnly:
    def apply(self, accrued_interest: Decimal, remaining_balance: Decimal) -> PaymentAllocation:
        return PaymentAllocation(accrued_interest, ZERO, ZERO)


@dataclass(frozen=True)
class LevelPayment:
    """
    每期还款总额固定

    应计利息超过还款额时，本期全部用于付息，未付利息结转到下一期；
    否则先付清利息，余额还本金。
    """

    amount: Decimal

    def apply(self, accrued_interest: Decimal, remaining_balance: Decimal) -> PaymentAllocation:
        if accrued_interest > self.amount:
            return PaymentAllocation(self.amount, ZERO, accrued_interest - self.amount)
        principal = _cap_principal(self.amount - accrued_interest, remaining_balance)
        return PaymentAllocation(accrued_interest, principal, ZERO)


@dataclass(frozen=True)
class LevelPrincipal:
    """每期本金固定，利息另付"""

    amount: Decimal

    def apply(self, accrued_interest: Decimal, remaining_balance: Decimal) -> PaymentAllocation:
        principal = _cap_principal(self.amount, remaining_balance)
        return PaymentAllocation(accrued_interest, principal, ZERO)


@dataclass(frozen=True)
class PrincipalOnly:
    """只还本金，利息继续累计到之后的还款"""

    amount: Decimal

    def apply(self, accrued_interest: Decimal, remaining_balance: Decimal) -> PaymentAllocation:
        principal = _cap_principal(self.amount, remaining_balance)
        return PaymentAllocation(ZERO, principal, accrued_interest)


@dataclass(frozen=True)
class PrincipalPercentage:
    fraction: Decimal  # 剩余本金的比例，0-1

    def apply(self, accrued_interest: Decimal, remaining_balance: Decimal) -> PaymentAllocation:
        principal = _cap_principal(remaining_balance * self.fraction, remaining_balance)
        return PaymentAllocation(accrued_interest, principal, ZERO)


@dataclass(frozen=True)
class Custom:
    def apply(self, accrued_interest: Decimal, remaining_balance: Decimal) -> PaymentAllocation:
        raise UnsupportedPaymentTypeError("自定义还款方式尚未实现")


PaymentRule = Union[
    Bullet, InterestOnly, LevelPayment, LevelPrincipal,
    PrincipalOnly, PrincipalPercentage, Custom,
]


def rule_for(schedule: PaymentSchedule) -> PaymentRule:
    """根据还款计划的还款方式构造规则"""
    try:
        payment_type = PaymentType(schedule.payment_type)
    except ValueError as exc:
        raise InvalidConfigurationError(f"无效的还款方式: {schedule.payment_type}") from exc

    amount = schedule.payment_amount
    if payment_type == PaymentType.BULLET:
        return Bullet()
    if payment_type == PaymentType.INTEREST_ONLY:
        return InterestOnly()
    if payment_type == PaymentType.LEVEL_PAYMENT:
        return LevelPayment(amount)
    if payment_type == PaymentType.LEVEL_PRINCIPAL:
        return LevelPrincipal(amount)
    if payment_type == PaymentType.PRINCIPAL_ONLY:
        return PrincipalOnly(amount)
    if payment_type == PaymentType.PRINCIPAL_PERCENTAGE:
        return PrincipalPercentage(amount)
    return Custom()
