"""Adapters – host-framework integrations for the masking engine."""
