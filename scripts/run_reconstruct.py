#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from reconstructors import ReconstructionError, ReconstructionResult
from reconstructors.factory import create_reconstructor, normalize_strategy
from scripts.config_loader import get_section, load_effective_config
from scripts.logging_helper import (
    log_debug,
    log_error,
    log_info,
    log_trace_block,
    log_warn,
    set_log_level,
)
from scripts.utils import DEFAULT_DELIMITER, format_seconds, load_text, parse_fragments, timed

STRATEGIES = ["priority", "brute_force", "both"]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description=(
            "Reconstruct a string from overlapping fragments by greedily merging the "
            "pair with the largest anchored overlap. Options default to config.default.yaml, "
            "layered with an optional config.yaml."
        )
    )
    ap.add_argument("--input", default="-", help="Fragment file (default: stdin)")
    ap.add_argument("--output", default=None, help="Write the reconstructed string here instead of stdout")
    ap.add_argument("--delimiter", default=None, help=f"Fragment delimiter (default from config, '{DEFAULT_DELIMITER}')")
    ap.add_argument("--strategy", default=None, help="priority | brute_force | both (runs and times each)")
    ap.add_argument("--config-dir", default=None, help="Directory holding config.default.yaml / config.yaml")
    ap.add_argument("--log-level", default=None, help="trace | debug | info | warn | error")
    ap.add_argument("--debug", action="store_true", help="Shortcut for --log-level debug")
    ap.add_argument("--trace", action="store_true", help="Shortcut for --log-level trace (logs every pair score)")
    return ap


def _resolve_level(cfg: dict, args: argparse.Namespace) -> str:
    level = (get_section(cfg, "logging").get("level") or "info").strip().lower()
    if args.log_level:
        level = args.log_level
    if args.debug:
        level = "debug"
    if args.trace:
        level = "trace"
    return level


def _run_strategy(cfg: dict, strategy: str, fragments: List[str]) -> ReconstructionResult:
    reconstructor = create_reconstructor(cfg, strategy_override=strategy)
    log_debug(f"Using reconstructor: {reconstructor.name()}")
    result, elapsed = timed(lambda: reconstructor.reconstruct(fragments))
    log_info(f"{reconstructor.name()} running time: {format_seconds(elapsed)} ({result.merge_count} merge(s))")
    return result


def _emit(text: str, output: Optional[str]) -> None:
    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        log_info(f"Done. Output: {out_path}")
    else:
        print(text)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg, has_local = load_effective_config(Path(args.config_dir) if args.config_dir else None)
    except (OSError, ValueError) as exc:
        print(f"FATAL: {exc}", file=sys.stderr)
        return 2

    level = _resolve_level(cfg, args)
    set_log_level(level)
    debug = level in ("debug", "trace")
    if not has_local:
        log_debug("config.yaml not found; using only config.default.yaml")

    input_cfg = get_section(cfg, "input")
    delimiter = args.delimiter or input_cfg.get("delimiter") or DEFAULT_DELIMITER
    strip_whitespace = bool(input_cfg.get("strip_whitespace", False))

    strategy = args.strategy or get_section(cfg, "reconstruction").get("strategy")
    strategy = "both" if (strategy or "").strip().lower() == "both" else normalize_strategy(strategy)
    if strategy not in STRATEGIES:
        log_error(f"Unknown strategy '{strategy}'. Choose one of: {', '.join(STRATEGIES)}")
        return 2

    try:
        raw = load_text(args.input)
    except OSError as exc:
        log_error(f"Cannot read input {args.input}: {exc}")
        return 2
    fragments = parse_fragments(raw, delimiter=delimiter, strip_whitespace=strip_whitespace)
    log_debug(f"Settings -> strategy={strategy}, delimiter={delimiter!r}, strip_whitespace={strip_whitespace}")
    log_debug(f"Parsed {len(fragments)} fragment(s)")

    to_run = ["brute_force", "priority"] if strategy == "both" else [strategy]
    results: List[ReconstructionResult] = []
    for name in to_run:
        try:
            results.append(_run_strategy(cfg, name, fragments))
        except ReconstructionError as exc:
            log_error(f"Error reconstructing message ({name}): {exc}")
            if debug:
                traceback.print_exc()
            return 1

    final = results[-1]
    if len(results) > 1 and len({r.text for r in results}) > 1:
        log_warn("brute_force and priority produced different results")
        for r in results:
            log_trace_block(f"Result [{r.strategy}]", r.text)
    _emit(final.text, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
