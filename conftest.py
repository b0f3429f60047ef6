# Ensure src/ is on sys.path so 'ircline' is importable when running pytest from
# a checkout that has not been installed.
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).parent.resolve() / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def reset_error_aggregator():
    """Start every test with an empty error aggregator."""
    yield
    from ircline.logging_config import error_aggregator

    error_aggregator.clear()
