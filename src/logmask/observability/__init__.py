"""Observability – structured logging for the masking library."""
