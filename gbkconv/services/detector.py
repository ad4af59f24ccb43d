from __future__ import annotations

from typing import Optional, Tuple

import chardet


def guess_encoding(data: bytes) -> Tuple[Optional[str], float]:
    """Statistical guess of the buffer's encoding, used for reporting only."""
    if not data:
        return None, 0.0
    detected = chardet.detect(data)
    encoding = detected.get("encoding")
    confidence = float(detected.get("confidence") or 0.0)
    return (encoding.lower() if encoding else None), confidence


__all__ = ["guess_encoding"]
