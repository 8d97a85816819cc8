"""Pytest configuration shared by all tests.

The command line entry point configures the package logger (handler, level
and propagation). To keep tests independent of the order they run in, the
package logger state is restored after every test.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from sample_batch import SAMPLE_INPUT


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger("app.discounts")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "input.txt"
    path.write_text("\n".join(SAMPLE_INPUT) + "\n", encoding="utf-8")
    return path
