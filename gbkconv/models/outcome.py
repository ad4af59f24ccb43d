from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Verdict(str, Enum):
    """Result of strictly decoding a whole buffer."""

    VALID_UTF8 = "utf-8"
    VALID_GBK = "gbk"
    UNDECODABLE = "undecodable"


@dataclass(frozen=True)
class Unchanged:
    pass


@dataclass(frozen=True)
class Converted:
    data: bytes


@dataclass(frozen=True)
class Failed:
    reason: str


Outcome = Union[Unchanged, Converted, Failed]


__all__ = ["Verdict", "Unchanged", "Converted", "Failed", "Outcome"]
