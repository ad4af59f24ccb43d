"""Pytest configuration to make the project root importable.

This keeps ``import gbkconv`` working when tests are run from the repository
root without installing the package.
"""

import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


GBK_SOURCE = "/* 你好，世界 */\nint main(void) { return 0; }\n"


@pytest.fixture
def gbk_source_bytes() -> bytes:
    return GBK_SOURCE.encode("gbk")


@pytest.fixture
def utf8_source_bytes() -> bytes:
    return GBK_SOURCE.encode("utf-8")
