"""复利预测与安全提取率测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from core.errors import InvalidArgument
from core.investment import (
    capital_for_withdrawal,
    compound_growth,
    geometric_monthly_rate,
    growth_frame,
    total_periods,
    yearly_growth,
)
from config.constants import GROWTH_COLUMNS


class TestCompoundGrowth:
    """复利预测测试"""

    def test_known_case(self):
        """1万初始 + 每月1000, 11.5%, 10年"""
        p = compound_growth(10000, 1000, 11.5, 10)
        assert len(p.growth) == 121
        first = p.growth[0]
        assert first.period == 0
        assert first.amount == 10000
        assert first.invested == 10000
        assert first.interest_accrued == 0
        assert first.period_interest == 0
        assert p.total_invested == 130000
        assert p.total > p.total_invested
        assert p.total_interest == pytest.approx(p.total - 130000)
        assert p.yield_on_cost == pytest.approx(p.total / 130000)
        assert p.growth[-1].period == 120
        assert p.growth[-1].period_fraction == pytest.approx(10.0)

    def test_geometric_rate(self):
        """按几何月利率复利 12 期，恰好等于年利率"""
        p = compound_growth(10000, 0, 10, 1)
        assert p.total == pytest.approx(11000.0)
        assert p.monthly_rate_percent == pytest.approx((1.1 ** (1 / 12) - 1) * 100)
        assert (1 + geometric_monthly_rate(11.5)) ** 12 == pytest.approx(1.115)

    def test_no_contribution(self):
        p = compound_growth(5000, 0, 8, 3)
        assert all(pt.invested == 5000 for pt in p.growth)
        amounts = [pt.amount for pt in p.growth]
        assert all(a < b for a, b in zip(amounts, amounts[1:]))

    def test_zero_rate(self):
        p = compound_growth(5000, 250, 0, 4)
        assert all(pt.amount == pt.invested for pt in p.growth)
        assert all(pt.period_interest == 0 for pt in p.growth)
        assert p.total_interest == 0
        assert p.monthly_rate_percent == 0
        assert p.yield_on_cost == pytest.approx(1.0)

    def test_invested_increments(self):
        p = compound_growth(1000, 300, 6, 2)
        invested = [pt.invested for pt in p.growth]
        for prev, cur in zip(invested, invested[1:]):
            assert cur - prev == pytest.approx(300)

    def test_contribution_before_interest(self):
        """期初投入：第 1 期利息按 (初始 + 投入) 计算"""
        p = compound_growth(1000, 100, 12, 1)
        m = geometric_monthly_rate(12)
        assert p.growth[1].amount == pytest.approx(1100 * (1 + m))
        assert p.growth[1].period_interest == pytest.approx(1100 * m)

    def test_period_interest_sums_to_total(self):
        p = compound_growth(2000, 150, 9, 5)
        assert sum(pt.period_interest for pt in p.growth) == pytest.approx(p.total_interest)

    def test_empty_investment(self):
        p = compound_growth(0, 0, 10, 1)
        assert p.total == 0
        assert p.yield_on_cost == 0

    def test_immutable(self):
        p = compound_growth(1000, 0, 5, 1)
        with pytest.raises(AttributeError):
            p.total = 0
        assert isinstance(p.growth, tuple)


class TestHorizon:
    @pytest.mark.parametrize("years,expected", [
        (10, 120),
        (0.5, 6),
        (0, 1),
        (0.05, 1),
        (0.125, 2),
        (2.5, 30),
    ])
    def test_total_periods(self, years, expected):
        assert total_periods(years) == expected

    def test_zero_years_clamped(self):
        p = compound_growth(1000, 100, 10, 0)
        assert len(p.growth) == 2


class TestGrowthFrames:
    def test_growth_frame(self):
        df = growth_frame(compound_growth(1000, 100, 10, 2))
        assert list(df.columns) == GROWTH_COLUMNS
        assert len(df) == 25

    def test_yearly_growth(self):
        df = yearly_growth(compound_growth(1000, 100, 10, 2.5))
        assert df["period"].tolist() == [0, 12, 24, 30]


class TestInvalidGrowth:
    @pytest.mark.parametrize("args", [
        (-1, 0, 10, 1),
        (0, -1, 10, 1),
        (0, 0, -1, 1),
        (0, 0, 10, -1),
        (0, 0, 10, float("inf")),
    ])
    def test_rejected(self, args):
        with pytest.raises(InvalidArgument):
            compound_growth(*args)


class TestWithdrawal:
    def test_known_case(self):
        assert capital_for_withdrawal(5000, 7.2) == pytest.approx(833333.3333, rel=1e-9)

    def test_default_rate(self):
        assert capital_for_withdrawal(5000) == capital_for_withdrawal(5000, 7.2)

    def test_four_percent_rule(self):
        assert capital_for_withdrawal(1000, 4) == pytest.approx(300000)

    def test_zero_cost(self):
        assert capital_for_withdrawal(0) == 0

    @pytest.mark.parametrize("args", [(-1, 7.2), (1000, 0), (1000, -4)])
    def test_rejected(self, args):
        with pytest.raises(InvalidArgument):
            capital_for_withdrawal(*args)
