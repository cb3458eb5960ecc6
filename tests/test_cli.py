"""CLI 测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from click.testing import CliRunner
from cli import cli


def _run(*args):
    return CliRunner().invoke(cli, list(args))


class TestLoanCommands:
    def test_price_csv(self):
        result = _run("price", "--principal", "150000", "--annual-rate", "10", "--periods", "12")
        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert lines[0].startswith("period,installment,interest,principal_paid")
        assert len(lines) == 13

    def test_sac_with_insurance(self):
        result = _run("sac", "--principal", "150000", "--annual-rate", "10",
                      "--periods", "120", "--insurance-rate", "1.5")
        assert result.exit_code == 0, result.output
        first = result.output.splitlines()[1].split(",")
        assert float(first[1]) == pytest.approx(2500.0 + 187.5)

    def test_invalid_principal(self):
        result = _run("price", "--principal=-5", "--annual-rate", "10", "--periods", "12")
        assert result.exit_code == 2
        assert "principal" in result.output

    def test_compare(self):
        result = _run("compare", "--principal", "200000", "--annual-rate", "9.5", "--periods", "180")
        assert result.exit_code == 0, result.output
        assert "Interest saved with SAC" in result.output
        assert "Total de juros" in result.output


class TestInvestmentCommands:
    def test_growth_yearly(self):
        result = _run("growth", "--initial", "10000", "--monthly", "1000",
                      "--annual-rate", "11.5", "--years", "10")
        assert result.exit_code == 0, result.output
        assert "Total invested: 130000.00" in result.output

    def test_growth_negative_years(self):
        result = _run("growth", "--annual-rate", "5", "--years=-1")
        assert result.exit_code == 2

    def test_withdrawal_capital(self):
        result = _run("withdrawal-capital", "--monthly-cost", "5000")
        assert result.exit_code == 0, result.output
        assert "Required capital: 833333.33" in result.output


def test_compare_zero_periods():
    result = _run("compare", "--principal", "1000", "--annual-rate", "10", "--periods", "0")
    assert result.exit_code == 0, result.output
    assert "Total de juros: 0.00" in result.output
    assert "-1000.00" not in result.output
