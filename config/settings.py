import os

# 日志级别，可通过环境变量 LOG_LEVEL 覆盖
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# 信贷模拟默认参数
DEFAULT_LOAN_AMOUNT = 200000.0
DEFAULT_LOAN_RATE = 9.5
DEFAULT_LOAN_MONTHS = 180
DEFAULT_INSURANCE_RATE = 1.5

# 投资模拟默认参数
DEFAULT_INITIAL_INVESTMENT = 10000.0
DEFAULT_MONTHLY_CONTRIBUTION = 1000.0
DEFAULT_INVESTMENT_RATE = 11.5
DEFAULT_INVESTMENT_YEARS = 10.0

# 安全提取率 (%)
DEFAULT_WITHDRAWAL_RATE = 7.2
DEFAULT_MONTHLY_COST = 5000.0

# 投资期限下限 (年)，避免 0 或负期限得不到数据
MIN_GROWTH_YEARS = 0.1

MONTHS_PER_YEAR = 12

# 页面配置
PAGE_TITLE = "Finanças Pessoais"
PAGE_ICON = "💰"
LAYOUT = "wide"

# 图表配色
COLORS = {
    "secondary": "#ff7f0e",
    "info": "#17becf",
    "principal": "#4f46e5",
    "interest": "#f43f5e",
    "insurance": "#6366f1",
    "invested": "#3b82f6",
    "amount": "#10b981",
    "sac": "#4f46e5",
    "price": "#f59e0b",
}

# 金额精度
AMOUNT_PRECISION = 2
RATE_PRECISION = 4
