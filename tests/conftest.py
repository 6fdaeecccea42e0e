import os

import pytest

from keyguess.bootstrap.config.loader import CONFIG_ENV

RECORD_KEY = bytes([116, 128, 0, 0, 0, 0, 0, 0, 53, 95, 114, 128, 0, 0, 0, 0, 0, 0, 1])
WRITE_PUT = bytes([80, 0, 118, 1, 0])


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep user config files and KEYGUESS_* variables out of the tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    for name in list(os.environ):
        if name.startswith("KEYGUESS_"):
            monkeypatch.delenv(name)
    return tmp_path


@pytest.fixture
def record_key() -> bytes:
    return RECORD_KEY


@pytest.fixture
def write_put() -> bytes:
    return WRITE_PUT
