"""Tests for tintwind.toml loading."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from tintwind.core.errors import ManifestError, TintwindError
from tintwind.core.manifest import (
    LOG_LEVEL_ENV,
    MANIFEST_FILENAME,
    ProjectManifest,
    find_manifest,
    load_manifest,
    load_project_manifest,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _write_toml(tmp_path: Path, body: str) -> Path:
    p = tmp_path / MANIFEST_FILENAME
    p.write_text(textwrap.dedent(body), encoding="utf-8")
    return p


# ---------------------------------------------------------------------------
# load_manifest
# ---------------------------------------------------------------------------


class TestLoadManifest:
    def test_full_file(self, tmp_path):
        path = _write_toml(
            tmp_path,
            """\
            [palette]
            name = "brand"
            count = 11
            format = "css"
            seed = "#10b981"
            second_seed = "#0ea5e9"

            [logging]
            level = "debug"
            """,
        )
        manifest = load_manifest(path)
        assert manifest.path == path
        assert manifest.palette.name == "brand"
        assert manifest.palette.count == 11
        assert manifest.palette.format == "css"
        assert manifest.palette.seed == "#10b981"
        assert manifest.palette.second_seed == "#0ea5e9"
        assert manifest.logging.level == "DEBUG"

    def test_empty_file_uses_defaults(self, tmp_path):
        manifest = load_manifest(_write_toml(tmp_path, ""))
        assert manifest.palette.name == "theme"
        assert manifest.palette.count == 9
        assert manifest.palette.format == "tailwind"
        assert manifest.palette.seed == "#3b82f6"
        assert manifest.palette.second_seed is None
        assert manifest.logging.level == "WARNING"

    def test_empty_second_seed_is_single_seed(self, tmp_path):
        path = _write_toml(tmp_path, '[palette]\nsecond_seed = ""\n')
        assert load_manifest(path).palette.second_seed is None

    def test_invalid_toml(self, tmp_path):
        path = _write_toml(tmp_path, "[palette\n")
        with pytest.raises(ManifestError, match="Invalid TOML"):
            load_manifest(path)

    @pytest.mark.parametrize("count", ["0", "-3", '"nine"', "true", "2.5"])
    def test_bad_count(self, tmp_path, count):
        path = _write_toml(tmp_path, f"[palette]\ncount = {count}\n")
        with pytest.raises(ManifestError, match="palette.count"):
            load_manifest(path)

    def test_bad_format(self, tmp_path):
        path = _write_toml(tmp_path, '[palette]\nformat = "scss"\n')
        with pytest.raises(ManifestError, match="palette.format"):
            load_manifest(path)

    def test_bad_log_level(self, tmp_path):
        path = _write_toml(tmp_path, '[logging]\nlevel = "chatty"\n')
        with pytest.raises(ManifestError, match="Unknown log level"):
            load_manifest(path)

    def test_env_overrides_level(self, tmp_path, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        path = _write_toml(tmp_path, '[logging]\nlevel = "ERROR"\n')
        assert load_manifest(path).logging.level == "INFO"

    def test_manifest_error_is_tintwind_error(self, tmp_path):
        path = _write_toml(tmp_path, '[palette]\nformat = "scss"\n')
        with pytest.raises(TintwindError) as exc_info:
            load_manifest(path)
        assert "scss" in exc_info.value.message


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


class TestProjectManifest:
    def test_find_manifest(self, tmp_path):
        assert find_manifest(tmp_path) is None
        path = _write_toml(tmp_path, "")
        assert find_manifest(tmp_path) == path

    def test_defaults_without_file(self, tmp_path):
        assert load_project_manifest(cwd=tmp_path) == ProjectManifest()

    def test_discovers_file_in_cwd(self, tmp_path):
        _write_toml(tmp_path, '[palette]\nname = "found"\n')
        assert load_project_manifest(cwd=tmp_path).palette.name == "found"

    def test_explicit_path(self, tmp_path):
        other = tmp_path / "configs"
        other.mkdir()
        path = _write_toml(other, '[palette]\nname = "explicit"\n')
        assert load_project_manifest(path, cwd=tmp_path).palette.name == "explicit"

    def test_explicit_missing_path(self, tmp_path):
        with pytest.raises(ManifestError, match="not found"):
            load_project_manifest(tmp_path / "missing.toml", cwd=tmp_path)

    def test_env_level_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert load_project_manifest(cwd=tmp_path).logging.level == "DEBUG"
