# infrastructure/scenario/yaml_loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from infrastructure.scenario.base_loader import ScenarioLoaderBase, ScenarioLoadError


class YamlScenarioLoader(ScenarioLoaderBase):
    """YAMLの録画ファイルからScenarioをロード"""

    def _load_file(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ScenarioLoadError(f"Recording file is not valid YAML: {path}: {exc}") from exc
