import os
import sys
from pathlib import Path

import pytest

# Ensure the src directory is on the path for imports
root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root / "src"))

log_dir = root / "logs"
log_dir.mkdir(parents=True, exist_ok=True)
os.environ.setdefault("MATCALC_LOG_DIR", str(log_dir))


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep persisted settings out of the user's home directory."""

    monkeypatch.setenv("MATCALC_LOG_CONFIG", str(tmp_path / "logging.json"))
    yield
    from matcalc.logging import reset_logger

    reset_logger()
