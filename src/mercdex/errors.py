"""Base exception for Mercdex."""


class MercdexError(Exception):
    """Base class for every error raised by the mercdex package."""

    pass
