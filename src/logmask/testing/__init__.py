"""Testing support – fakes and property-based generators.

Import in your tests::

    from logmask.testing import CapturingHandler, log_line_strategy
"""

from logmask.testing.fakes import CapturingHandler
from logmask.testing.generators import (
    SAMPLE_RULES,
    card_number_strategy,
    email_strategy,
    log_line_strategy,
    rule_config_strategy,
)

__all__ = [
    "SAMPLE_RULES",
    "CapturingHandler",
    "card_number_strategy",
    "email_strategy",
    "log_line_strategy",
    "rule_config_strategy",
]
