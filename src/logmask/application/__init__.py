"""Application layer – masking use cases."""
