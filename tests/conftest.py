import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure the project root is importable when pytest starts from any directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from function_drawer.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep the package logger silent so test output only shows failures."""
    configure_logging(log_level=LogLevel.SILENT)
    yield


@pytest.fixture
def sample_xs():
    """Sample points including 0 and both signs."""
    return np.linspace(-3.0, 3.0, 25)
