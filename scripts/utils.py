import sys
import time
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from scripts.logging_helper import log_warn

T = TypeVar("T")

DEFAULT_DELIMITER = ";"


def load_text(path: Optional[str]) -> str:
    """Read the whole input from path, or from stdin when path is None or '-'."""
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        return f.read()


def parse_fragments(text: str, delimiter: str = DEFAULT_DELIMITER, strip_whitespace: bool = False) -> List[str]:
    """
    Split raw input into fragments on `delimiter`.
    Trailing line breaks are removed first; empty tokens are dropped with a warning
    since an empty fragment cannot overlap anything.
    """
    if not delimiter:
        raise ValueError("Fragment delimiter must be a non-empty string")
    body = (text or "").rstrip("\r\n")
    if not body:
        return []
    out: List[str] = []
    skipped = 0
    for token in body.split(delimiter):
        if strip_whitespace:
            token = token.strip()
        if not token:
            skipped += 1
            continue
        out.append(token)
    if skipped:
        log_warn(f"Skipped {skipped} empty fragment(s) in input")
    return out


def check_fragment_lengths(fragments: Sequence[str], max_length: Optional[int]) -> List[int]:
    """Warn about fragments longer than max_length; returns their indexes."""
    if not max_length or max_length <= 0:
        return []
    too_long = [i for i, frag in enumerate(fragments) if len(frag) > max_length]
    for i in too_long:
        log_warn(f"Fragment {i} has {len(fragments[i])} chars (> {max_length}); overlap scoring may be slow")
    return too_long


def timed(func: Callable[[], T]) -> Tuple[T, float]:
    """Run func() and return (result, elapsed seconds)."""
    begin = time.perf_counter()
    result = func()
    return result, time.perf_counter() - begin


def format_seconds(seconds: float) -> str:
    return f"{seconds:.6f} s"
