# journal_analyzer/infra/yaml_io.py
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any

import yaml

from journal_analyzer.exceptions import CatalogLoadError


def load_yaml(path: Path) -> Any:
    """
    Read a YAML file.

    Parse errors surface as CatalogLoadError so callers only deal with the
    project's own exception types. An empty file loads as None.
    """
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogLoadError(f"Not valid YAML: {path}") from e


def save_yaml(path: Path, data: Any) -> None:
    """
    Write ``data`` to ``path`` atomically.

    The document goes to a temp file in the same directory first and is
    then renamed over the target, so readers never see a half-written catalog.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise
