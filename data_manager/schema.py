from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from config.constants import AccrualBasis, PaymentFrequency, PaymentType


@dataclass(frozen=True)
class Loan:
    accrual_basis: AccrualBasis
    amount: Decimal  # 贷款本金
    interest_rate: Decimal  # 年利率，小数形式（0.10 = 10%）
    interest_accrual_start_date: date


@dataclass(frozen=True)
class PaymentSchedule:
    start_date: date  # 首次还款日
    end_date: date  # frequency 为 bullet 时忽略
    payment_frequency: PaymentFrequency
    payment_type: PaymentType
    # level_payment / level_principal / principal_only: 金额
    # principal_percentage: 剩余本金比例 [0, 1]
    # bullet / interest_only: 忽略
    payment_amount: Decimal = Decimal(0)


@dataclass(frozen=True)
class AmortizationRecord:
    """对外输出的一期还款结果"""

    date: date
    interest: Decimal
    principal: Decimal
    remaining_balance: Decimal


@dataclass
class AmortizationScheduleItem:
    """引擎内部的一期还款，计算完成后转为 AmortizationRecord 输出"""

    date: date
    # 生成该期的还款计划（只读共享引用，不对外输出）
    schedule: PaymentSchedule = field(repr=False, compare=False)
    interest: Decimal = Decimal(0)
    principal: Decimal = Decimal(0)
    remaining_balance: Decimal = Decimal(0)

    def to_record(self) -> AmortizationRecord:
        return AmortizationRecord(
            date=self.date,
            interest=self.interest,
            principal=self.principal,
            remaining_balance=self.remaining_balance,
        )


@dataclass
class ScheduleSummary:
    payment_count: int
    total_interest: Decimal
    total_principal: Decimal
    total_payment: Decimal
    payoff_date: Optional[date] = None
