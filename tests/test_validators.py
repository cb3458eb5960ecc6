"""参数校验测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest
from core.errors import InvalidArgument
from core.validators import (
    ensure_valid,
    validate_growth_params,
    validate_loan_params,
    validate_withdrawal_params,
)


class TestLoanParams:
    def test_valid(self):
        assert validate_loan_params(1000, 10, 12) == (True, "")
        assert validate_loan_params(1000.0, 0, 0, 1.5) == (True, "")

    def test_numpy_scalars(self):
        ok, _ = validate_loan_params(np.float64(1000), np.float64(10), np.int64(12))
        assert ok

    @pytest.mark.parametrize("args", [
        (0, 10, 12),
        ("1000", 10, 12),
        (1000, None, 12),
        (1000, 10, 12.0),
        (1000, 10, 12, float("nan")),
    ])
    def test_invalid(self, args):
        ok, message = validate_loan_params(*args)
        assert not ok
        assert message


class TestGrowthParams:
    def test_zero_years_allowed(self):
        assert validate_growth_params(0, 0, 0, 0) == (True, "")

    def test_negative_years(self):
        ok, message = validate_growth_params(0, 0, 0, -0.5)
        assert not ok
        assert "years" in message


class TestWithdrawalParams:
    def test_zero_rate(self):
        ok, message = validate_withdrawal_params(1000, 0)
        assert not ok
        assert "withdrawal rate" in message


class TestEnsureValid:
    def test_passes(self):
        ensure_valid((True, ""))

    def test_raises_with_message(self):
        with pytest.raises(InvalidArgument, match="boom"):
            ensure_valid((False, "boom"))
