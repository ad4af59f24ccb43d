from __future__ import annotations

from ..models.outcome import Verdict


def _decodes(data: bytes, encoding: str) -> bool:
    try:
        data.decode(encoding)
    except UnicodeDecodeError:
        return False
    return True


def classify(data: bytes) -> Verdict:
    """Decide which encoding the whole buffer is valid under.

    UTF-8 is tried first, so pure ASCII (valid under both) is reported as
    UTF-8. A single stray byte anywhere makes the buffer undecodable.
    """
    if _decodes(data, "utf-8"):
        return Verdict.VALID_UTF8
    if _decodes(data, "gbk"):
        return Verdict.VALID_GBK
    return Verdict.UNDECODABLE


__all__ = ["classify"]
