import os

import pytest

from dingbot.config.settings import reset


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    for key in list(os.environ):
        if key.upper().startswith("DINGBOT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset()
    yield
    reset()
