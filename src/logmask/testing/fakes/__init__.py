"""Testing fakes."""
from logmask.testing.fakes.handler import CapturingHandler

__all__ = ["CapturingHandler"]
