class AttemptLogError(Exception):
    """Raised when an attempt record cannot be appended to the log store."""
