from pathlib import Path

import pytest

from prof import ProfileClient
from prof.conf import DEFAULT_API_ROOT, Settings


def test_default_settings() -> None:
    settings = Settings.load()

    assert settings.api_root == DEFAULT_API_ROOT
    assert settings.timeout == 30.0


def test_settings_from_file(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("api_root: https://prof.example.com/\ntimeout: 5.0\n")

    settings = Settings.load(path)

    assert settings.api_root == "https://prof.example.com/"
    assert settings.timeout == 5.0


def test_missing_settings_file_warns(tmp_path: Path) -> None:
    with pytest.warns(UserWarning, match="Failed to load settings"):
        settings = Settings.load(tmp_path / "missing.yaml")

    assert settings.api_root == DEFAULT_API_ROOT


def test_client_defaults_to_settings_root() -> None:
    assert ProfileClient().base_url == DEFAULT_API_ROOT
