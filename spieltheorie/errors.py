"""Exceptions raised for invalid caller input."""


class InvalidRoundsError(ValueError):
    """Round count is not a positive integer."""


class UnknownStrategyError(ValueError):
    """Strategy name is not part of the catalogue."""
