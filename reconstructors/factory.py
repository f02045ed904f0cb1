from __future__ import annotations

from typing import Dict, Optional, Tuple

from .base import Reconstructor

_ALIASES = {
    "brute": "brute_force",
    "bruteforce": "brute_force",
    "brute-force": "brute_force",
    "heap": "priority",
    "pq": "priority",
}


def normalize_strategy(name: Optional[str]) -> str:
    key = (name or "priority").strip().lower()
    return _ALIASES.get(key, key)


def _effective_strategy_and_config(cfg: Dict, strategy_override: Optional[str]) -> Tuple[str, Dict]:
    """Resolve strategy name and its settings from the global config dict.

    Expects:
      reconstruction:
        strategy: priority|brute_force
        max_fragment_length: 1200
    """
    section = cfg.get("reconstruction", {}) if isinstance(cfg.get("reconstruction"), dict) else {}
    strategy = normalize_strategy(strategy_override or section.get("strategy"))
    return strategy, dict(section)


def create_reconstructor(cfg: Dict, *, strategy_override: Optional[str] = None) -> Reconstructor:
    """Factory returning a configured Reconstructor based on config and CLI override."""
    strategy, s_cfg = _effective_strategy_and_config(cfg, strategy_override)
    max_len = s_cfg.get("max_fragment_length")

    if strategy == "priority":
        from .priority import PriorityReconstructor
        return PriorityReconstructor(max_fragment_length=max_len)
    if strategy == "brute_force":
        from .brute_force import BruteForceReconstructor
        return BruteForceReconstructor(max_fragment_length=max_len)
    raise ValueError(f"Unknown reconstruction strategy '{strategy}'. Use 'priority' or 'brute_force'.")
