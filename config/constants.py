from enum import Enum


class AccrualBasis(str, Enum):
    ACTUAL_360 = "actual_360"
    ACTUAL_365 = "actual_365"
    ACTUAL_ACTUAL = "actual_actual"
    THIRTY_360 = "thirty_360"

    @property
    def label(self) -> str:
        return {
            "actual_360": "Actual/360",
            "actual_365": "Actual/365",
            "actual_actual": "Actual/Actual",
            "thirty_360": "30/360",
        }[self.value]


class PaymentFrequency(str, Enum):
    ANNUAL = "annual"
    SEMIANNUAL = "semiannual"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    BULLET = "bullet"  # 只还一次

    @property
    def label(self) -> str:
        return {
            "annual": "每年",
            "semiannual": "每半年",
            "quarterly": "每季度",
            "monthly": "每月",
            "weekly": "每周",
            "bullet": "一次性",
        }[self.value]


class PaymentType(str, Enum):
    BULLET = "bullet"  # 一次性结清
    INTEREST_ONLY = "interest_only"  # 只还利息
    LEVEL_PAYMENT = "level_payment"  # 等额还款
    LEVEL_PRINCIPAL = "level_principal"  # 等额本金
    PRINCIPAL_PERCENTAGE = "principal_percentage"  # 按剩余本金比例
    PRINCIPAL_ONLY = "principal_only"  # 只还本金
    CUSTOM = "custom"  # 预留，未实现

    @property
    def label(self) -> str:
        return {
            "bullet": "一次性结清",
            "interest_only": "只还利息",
            "level_payment": "等额还款",
            "level_principal": "等额本金",
            "principal_percentage": "剩余本金比例",
            "principal_only": "只还本金",
            "custom": "自定义",
        }[self.value]


# 原 Web 表单提交的整数编码
ACCRUAL_BASIS_CODES = {
    0: AccrualBasis.ACTUAL_360,
    1: AccrualBasis.ACTUAL_365,
    2: AccrualBasis.ACTUAL_ACTUAL,
    3: AccrualBasis.THIRTY_360,
}

PAYMENT_FREQUENCY_CODES = {
    0: PaymentFrequency.ANNUAL,
    1: PaymentFrequency.BULLET,
    2: PaymentFrequency.MONTHLY,
    3: PaymentFrequency.QUARTERLY,
    4: PaymentFrequency.SEMIANNUAL,
    5: PaymentFrequency.WEEKLY,
}

PAYMENT_TYPE_CODES = {
    0: PaymentType.BULLET,
    1: PaymentType.CUSTOM,
    2: PaymentType.INTEREST_ONLY,
    3: PaymentType.LEVEL_PAYMENT,
    4: PaymentType.LEVEL_PRINCIPAL,
    5: PaymentType.PRINCIPAL_PERCENTAGE,
    6: PaymentType.PRINCIPAL_ONLY,
}

# 还款频率对应的日历步长：(月数, 周数)
FREQUENCY_STEPS = {
    PaymentFrequency.ANNUAL: (12, 0),
    PaymentFrequency.SEMIANNUAL: (6, 0),
    PaymentFrequency.QUARTERLY: (3, 0),
    PaymentFrequency.MONTHLY: (1, 0),
    PaymentFrequency.WEEKLY: (0, 1),
}

# 列定义
AMORTIZATION_SCHEDULE_COLUMNS = [
    "date", "interest", "principal", "remaining_balance",
]
