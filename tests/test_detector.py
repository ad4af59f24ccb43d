"""Tests for the informational chardet guess."""
from __future__ import annotations

from gbkconv.services.detector import guess_encoding


def test_empty_buffer_has_no_guess() -> None:
    assert guess_encoding(b"") == (None, 0.0)


def test_ascii_source_gets_a_guess() -> None:
    encoding, confidence = guess_encoding(b"int main(void) { return 0; }\n")
    # The label itself differs between chardet releases.
    assert encoding is not None and encoding == encoding.lower()
    assert 0.0 < confidence <= 1.0


def test_guess_is_normalised(gbk_source_bytes: bytes) -> None:
    encoding, confidence = guess_encoding(gbk_source_bytes * 20)
    assert encoding is None or encoding == encoding.lower()
    assert 0.0 <= confidence <= 1.0
