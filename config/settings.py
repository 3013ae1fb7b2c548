# 引擎内部 Decimal 有效位数
DECIMAL_PRECISION = 28

# 单个还款计划最多生成的日期数，防止异常输入导致无限循环
MAX_PAYMENT_DATES = 100_000

# 输出金额精度（仅用于 CLI / 页面展示，引擎内部不做舍入）
AMOUNT_PRECISION = 2
TERM_PRECISION = 10

# 日志
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# 页面配置
PAGE_TITLE = "贷款摊还计划计算器"
PAGE_ICON = "📅"
LAYOUT = "wide"

# 默认输入
DEFAULT_LOAN_AMOUNT = 100000.0
DEFAULT_INTEREST_RATE = 5.0  # 年利率 (%)
DEFAULT_PAYMENT_AMOUNT = 500.0

# 图表配色
COLORS = {
    "principal": "#1f77b4",
    "interest": "#ff7f0e",
    "balance": "#2ca02c",
}
