from config.settings import AMOUNT_PRECISION


def fmt_amount(value: float, unit: str = "R$") -> str:
    """格式化金额（巴西格式）：1234567.89 -> R$ 1.234.567,89"""
    text = f"{value:,.{AMOUNT_PRECISION}f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{unit} {text}"


def fmt_amount_short(value: float) -> str:
    """图表标签用的缩写金额：1500000 -> R$ 1,5 mi"""
    if abs(value) >= 1e6:
        return f"R$ {value / 1e6:.1f} mi".replace(".", ",")
    if abs(value) >= 1e3:
        return f"R$ {value / 1e3:.1f} mil".replace(".", ",")
    return fmt_amount(value)


def fmt_rate(value: float) -> str:
    """格式化利率百分比：9.5 -> 9,50%"""
    return f"{value:.2f}%".replace(".", ",")


def fmt_percent(value: float) -> str:
    """格式化比例：0.3456 -> 34,56%"""
    return fmt_rate(value * 100)


def fmt_months(months: int) -> str:
    """格式化月数为年月：180 -> 15 anos"""
    years = months // 12
    remain = months % 12
    year_text = f"{years} ano" if years == 1 else f"{years} anos"
    month_text = f"{remain} mês" if remain == 1 else f"{remain} meses"
    if remain == 0:
        return year_text
    if years == 0:
        return month_text
    return f"{year_text} e {month_text}"
