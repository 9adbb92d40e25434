"""Exception classes for sortedlinkmap."""


class SortedLinkMapError(Exception):
    """Base exception for all sortedlinkmap errors."""


class InvalidKeyError(SortedLinkMapError, TypeError):
    """Raised when a key is not a string."""


class InvalidValueError(SortedLinkMapError, TypeError):
    """Raised when a value is not a real number."""
