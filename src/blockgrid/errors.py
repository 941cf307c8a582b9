class InvalidConfiguration(ValueError):
    """Raised when layout parameters cannot produce a valid layout."""
