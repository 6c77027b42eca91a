from __future__ import annotations

from pathlib import Path

import pytest

import powerctl.config as config_module


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep the developer's own config file and TIBBER_* variables out of tests."""
    for name in (config_module.ENV_TOKEN, config_module.ENV_HOME_ID, config_module.ENV_FORMAT):
        monkeypatch.delenv(name, raising=False)
    default_path = tmp_path / "user-config" / config_module.CONFIG_FILENAME
    monkeypatch.setattr(config_module, "default_config_path", lambda: default_path)
    return default_path
