from __future__ import annotations

from typing import Tuple

from ..models.outcome import Converted, Failed, Outcome, Unchanged, Verdict
from .classifier import classify


# CJK Unified Ideographs
DEFAULT_CJK_RANGE: Tuple[int, int] = (0x4E00, 0x9FFF)

UNDECODABLE_REASON = "cannot decode as GBK or UTF-8"


def contains_cjk(text: str, cjk_range: Tuple[int, int] = DEFAULT_CJK_RANGE) -> bool:
    start, end = cjk_range
    return any(start <= ord(char) <= end for char in text)


def decide(data: bytes, verdict: Verdict, cjk_range: Tuple[int, int] = DEFAULT_CJK_RANGE) -> Outcome:
    if verdict is Verdict.VALID_UTF8:
        return Unchanged()

    if verdict is Verdict.VALID_GBK:
        try:
            text = data.decode("gbk")
        except UnicodeDecodeError:
            # Verdict did not come from classify(); treat like any other bad buffer.
            return Failed(UNDECODABLE_REASON)
        if not contains_cjk(text, cjk_range):
            return Unchanged()
        return Converted(text.encode("utf-8"))

    return Failed(UNDECODABLE_REASON)


def process(data: bytes, cjk_range: Tuple[int, int] = DEFAULT_CJK_RANGE) -> Outcome:
    """Classify ``data`` and turn the verdict into an outcome.

    Pure function of its input: safe to call from several threads at once.
    """
    return decide(data, classify(data), cjk_range)


__all__ = ["DEFAULT_CJK_RANGE", "UNDECODABLE_REASON", "contains_cjk", "decide", "process"]
