"""Unit tests for wordlens.config."""

import json
from pathlib import Path

import pytest

from wordlens.config import CONFIG_ENV_VAR, WordLensConfig, load_config
from wordlens.errors import ConfigError


class TestLoadConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        cfg = load_config()
        assert cfg == WordLensConfig()
        assert cfg.class_prefix == "wdautohl"
        assert cfg.pdf_page_separator == " "
        assert cfg.default_sort == "count"

    def test_file_overrides(self, tmp_path: Path) -> None:
        p = tmp_path / "wordlens.json"
        p.write_text(json.dumps({"class_prefix": "hl", "pdf_max_workers": 2}), encoding="utf-8")
        cfg = load_config(p)
        assert cfg.class_prefix == "hl"
        assert cfg.pdf_max_workers == 2
        assert cfg.default_descending is True

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        p = tmp_path / "env.json"
        p.write_text(json.dumps({"default_sort": "rank"}), encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(p))
        assert load_config().default_sort == "rank"

    def test_invalid_field(self, tmp_path: Path) -> None:
        p = tmp_path / "bad.json"
        p.write_text(json.dumps({"pdf_max_workers": 0}), encoding="utf-8")
        with pytest.raises(ConfigError, match="pdf_max_workers"):
            load_config(p)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(tmp_path / "absent.json")
