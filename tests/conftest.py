import sys
from pathlib import Path

import pytest

# Ensure `import gts_validator` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _isolate_validator_env(monkeypatch) -> None:
    for name in ("GTS_VALIDATOR_VENDOR", "GTS_VALIDATOR_STRICT", "DEBUG", "LOG_VERBOSITY"):
        monkeypatch.delenv(name, raising=False)
