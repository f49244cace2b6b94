"""Errors raised by the calling layer around the normalizer."""


class InvalidInputError(ValueError):
    """Top-level input is not a JSON object (or not JSON at all)."""
