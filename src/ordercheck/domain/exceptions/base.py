"""Base exceptions for ordercheck."""


class OrderCheckError(Exception):
    """Root exception for all ordercheck errors.

    Rules never raise; these come from parsing and configuration.
    """
