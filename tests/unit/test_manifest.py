"""Tests for blink.toml loading."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from blink.core.errors import ManifestError
from blink.core.ir import InputLevel
from blink.core.manifest import (
    LOG_LEVEL_ENV_VAR,
    BlinkManifest,
    load_manifest,
    load_project_manifest,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _write_toml(tmp_path: Path, content: str) -> Path:
    p = tmp_path / "blink.toml"
    p.write_text(textwrap.dedent(content), encoding="utf-8")
    return p


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadManifest:
    def test_full_manifest(self, tmp_path: Path) -> None:
        path = _write_toml(
            tmp_path,
            """\
            [planner]
            default_level = "extreme"
            default_industry = "bakery"
            tagline_seed = 42

            [variants]
            presets = ["luxury", "modern-minimal", "classic-elegant"]
            themes = ["dark"]

            [logging]
            level = "info"
            """,
        )
        manifest = load_manifest(path)

        assert manifest.planner.default_level == InputLevel.EXTREME
        assert manifest.planner.default_industry == "bakery"
        assert manifest.planner.tagline_seed == 42
        assert manifest.variants.presets == ["luxury", "modern-minimal", "classic-elegant"]
        assert manifest.variants.themes == ["dark"]
        assert manifest.logging.level == "INFO"

    def test_empty_manifest_uses_defaults(self, tmp_path: Path) -> None:
        manifest = load_manifest(_write_toml(tmp_path, ""))
        assert manifest == BlinkManifest()
        assert manifest.planner.default_level == InputLevel.MODERATE
        assert manifest.planner.tagline_seed is None
        assert manifest.variants.presets == ["luxury", "friendly"]

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_project_manifest(tmp_path) == BlinkManifest()

    def test_project_manifest(self, tmp_path: Path) -> None:
        _write_toml(tmp_path, '[planner]\ndefault_level = "minimal"\n')
        assert load_project_manifest(tmp_path).planner.default_level == InputLevel.MINIMAL


class TestManifestErrors:
    """Invalid manifests raise ManifestError pointing at the field."""

    def test_invalid_toml(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError, match="Invalid TOML"):
            load_manifest(_write_toml(tmp_path, "[planner\n"))

    def test_unknown_level(self, tmp_path: Path) -> None:
        path = _write_toml(tmp_path, '[planner]\ndefault_level = "maximal"\n')
        with pytest.raises(ManifestError) as exc_info:
            load_manifest(path)
        assert exc_info.value.context.field == "planner.default_level"
        assert "minimal, moderate, extreme" in exc_info.value.message

    @pytest.mark.parametrize("seed", ['"seven"', "true", "1.5"])
    def test_non_integer_seed(self, tmp_path: Path, seed: str) -> None:
        path = _write_toml(tmp_path, f"[planner]\ntagline_seed = {seed}\n")
        with pytest.raises(ManifestError, match="tagline_seed"):
            load_manifest(path)

    def test_unknown_log_level(self, tmp_path: Path) -> None:
        path = _write_toml(tmp_path, '[logging]\nlevel = "chatty"\n')
        with pytest.raises(ManifestError, match="Unknown log level"):
            load_manifest(path)


class TestLogLevel:
    def test_env_var_overrides_manifest(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
        assert BlinkManifest().log_level == "DEBUG"

    def test_invalid_env_var_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "loud")
        assert BlinkManifest().log_level == "WARNING"

    def test_manifest_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        manifest = BlinkManifest()
        manifest.logging.level = "ERROR"
        assert manifest.log_level == "ERROR"
