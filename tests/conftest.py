import sys
from decimal import localcontext
from pathlib import Path

import pytest

# 确保项目根目录在 sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from config.settings import DECIMAL_PRECISION  # noqa: E402


@pytest.fixture(autouse=True)
def decimal_context():
    """每个测试使用与引擎相同精度的 Decimal 上下文，互不影响"""
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        yield ctx
