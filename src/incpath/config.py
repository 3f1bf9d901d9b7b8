# src/incpath/config.py
"""
Search path configuration files.

Example:
  include_dirs:
    - include
    - ../shared/include
  include_cwd: false
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .search_path import SearchPath


class SearchConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    include_dirs: list[Path] = []
    include_cwd: bool = False

    def to_search_path(self, base_dir: Path | None = None) -> SearchPath:
        """Relative include_dirs are anchored at base_dir when one is given."""
        dirs = [d if base_dir is None or d.is_absolute() else base_dir / d for d in self.include_dirs]
        search_path = SearchPath(dirs)
        if self.include_cwd:
            search_path = search_path.with_current_dir()
        return search_path


def load_search_config(path: Path) -> SearchConfig:
    """Load and validate a YAML search path config.

    Raises:
        FileNotFoundError: If path doesn't exist
        ValueError: If the file is not valid YAML or doesn't match SearchConfig
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Search path config not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"{path}: invalid YAML: {e}") from e

    if data is None:
        return SearchConfig()

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")

    try:
        return SearchConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"{path}: {e}") from e


def load_search_path(path: Path) -> SearchPath:
    path = Path(path)
    return load_search_config(path).to_search_path(base_dir=path.parent)
