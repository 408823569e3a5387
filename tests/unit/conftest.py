"""Shared fixtures for unit tests."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest
import structlog

from logmask.application.masking import MaskingEngine, compile_rules


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo structlog / root-logger configuration made by a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def pii_rules():
    """Credit card, email and SSN rules in that order."""
    return compile_rules(
        {
            "credit_card": (r"\b(?:\d[ -]?){12,18}\d\b", 4),
            "email": (r"[\w.+-]+@[\w-]+\.[\w.]+", 0),
            "ssn": (r"\b\d{3}-\d{2}-\d{4}\b", 4, "X"),
        }
    )


@pytest.fixture
def engine(pii_rules) -> MaskingEngine:
    return MaskingEngine(pii_rules)
