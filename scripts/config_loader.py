from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

DEFAULT_CONFIG_NAME = "config.default.yaml"
LOCAL_CONFIG_NAME = "config.yaml"


def project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _read_yaml_dict(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping: {path}")
    return data


def deep_merge(base: Any, override: Any) -> Any:
    """Merge override onto base.

    - dicts merge recursively
    - lists are replaced whole
    - scalars override
    """
    if isinstance(base, dict) and isinstance(override, dict):
        merged: Dict[str, Any] = dict(base)
        for key, value in override.items():
            merged[key] = deep_merge(base[key], value) if key in base else value
        return merged
    return override


def load_effective_config(base_dir: Optional[Path] = None) -> Tuple[Dict[str, Any], bool]:
    """Load config.default.yaml and layer an optional config.yaml over it.

    Returns (config, has_local). A missing default file is an error; a
    missing local file is not.
    """
    base_dir = Path(base_dir) if base_dir is not None else project_root()
    default_path = base_dir / DEFAULT_CONFIG_NAME
    if not default_path.exists():
        raise FileNotFoundError(f"Missing required config: {default_path}")
    cfg = _read_yaml_dict(default_path)

    local_path = base_dir / LOCAL_CONFIG_NAME
    if not local_path.exists():
        return cfg, False
    return deep_merge(cfg, _read_yaml_dict(local_path)), True


def get_section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = cfg.get(name)
    return section if isinstance(section, dict) else {}
