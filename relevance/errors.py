class InvalidArgument(ValueError):
    """Raised when a caller hands the scorer a record or option it cannot use."""
