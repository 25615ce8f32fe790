from pathlib import Path

import pytest

from mosci.common.logging import DEFAULT_LOG_PATH, configure_log_path


@pytest.fixture(autouse=True)
def log_path(tmp_path: Path):
    """Send JSON log entries of every test to a temporary file."""
    path = tmp_path / "logs" / "mosci.jsonl"
    configure_log_path(path)
    yield path
    configure_log_path(DEFAULT_LOG_PATH)
