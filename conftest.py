# Project root on sys.path, and a clean quicklog environment per test
import sys, pathlib
import pytest
root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from quicklog.environment import reset_environment

QUICKLOG_VARS = ("QUICKLOG_BUILD", "QUICKLOG_EDITOR", "QUICKLOG_DEBUG", "QUICKLOG_COLOR_DISABLED")

@pytest.fixture(autouse=True)
def clean_quicklog_env(monkeypatch):
    for name in QUICKLOG_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_environment()
    yield
    reset_environment()
