"""Version lookup for tintwind."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Source checkouts read pyproject.toml; installed copies use package metadata."""
    if _PYPROJECT.is_file():
        project = tomllib.loads(_PYPROJECT.read_text(encoding="utf-8")).get("project", {})
        if project.get("name") == "tintwind" and "version" in project:
            return str(project["version"])
    try:
        return _metadata_version("tintwind")
    except PackageNotFoundError:
        return "0.0.0"
