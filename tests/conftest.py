import sys
import pytest
from pathlib import Path

# 确保项目根目录在 sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def reference_loan():
    """信贷模拟页面的默认参数：20万, 9.5%, 180期, 保险1.5%"""
    return {
        "principal": 200000.0,
        "yearly_rate": 9.5,
        "periods": 180,
        "yearly_insurance": 1.5,
    }
