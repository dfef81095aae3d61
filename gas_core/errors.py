"""Errors raised by the gas fee engine."""


class InvalidParameter(ValueError):
    """Raised when a transaction shape or constants table is out of range."""


class UnknownProfile(LookupError):
    """Raised when a data profile name is not in the catalog."""
