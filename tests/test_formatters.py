"""格式化测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.formatters import fmt_amount, fmt_amount_short, fmt_months, fmt_percent, fmt_rate


def test_fmt_amount():
    assert fmt_amount(1234567.891) == "R$ 1.234.567,89"
    assert fmt_amount(0) == "R$ 0,00"
    assert fmt_amount(-1500.5) == "R$ -1.500,50"


def test_fmt_amount_short():
    assert fmt_amount_short(1500000) == "R$ 1,5 mi"
    assert fmt_amount_short(25000) == "R$ 25,0 mil"
    assert fmt_amount_short(999) == "R$ 999,00"


def test_fmt_rate_and_percent():
    assert fmt_rate(9.5) == "9,50%"
    assert fmt_percent(0.3456) == "34,56%"


def test_fmt_months():
    assert fmt_months(180) == "15 anos"
    assert fmt_months(12) == "1 ano"
    assert fmt_months(13) == "1 ano e 1 mês"
    assert fmt_months(6) == "6 meses"
    assert fmt_months(30) == "2 anos e 6 meses"
