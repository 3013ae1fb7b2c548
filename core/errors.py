"""摊还计算的错误类型"""


class AmortizationError(Exception):
    """摊还计算错误基类"""


class InvalidConfigurationError(AmortizationError, ValueError):
    """贷款或还款计划参数非法"""


class InvalidDateRangeError(InvalidConfigurationError):
    """计息区间结束日早于起始日"""


class EmptyScheduleError(InvalidConfigurationError):
    """没有任何还款日期"""


class UnsupportedPaymentTypeError(AmortizationError, NotImplementedError):
    """预留的还款方式（custom）尚未实现"""
