from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def isolate_medassist_env(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MEDASSIST_TEST_MODE", "1")
    monkeypatch.setenv("MEDASSIST_STATE_DIR", str(tmp_path / "state"))
    monkeypatch.setenv("MEDASSIST_LOG_TO_FILE", "off")
    monkeypatch.delenv("MEDASSIST_CONFIG", raising=False)
    monkeypatch.delenv("MEDASSIST_REPLY_DELAY_S", raising=False)
    monkeypatch.delenv("MEDASSIST_ANALYSIS_DELAY_S", raising=False)
