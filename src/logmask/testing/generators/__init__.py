"""Testing generators – Hypothesis strategies for masking inputs."""
from logmask.testing.generators.strategies import (
    SAMPLE_RULES,
    card_number_strategy,
    email_strategy,
    log_line_strategy,
    rule_config_strategy,
)

__all__ = [
    "SAMPLE_RULES",
    "card_number_strategy",
    "email_strategy",
    "log_line_strategy",
    "rule_config_strategy",
]
