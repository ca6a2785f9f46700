class InvalidArgumentError(ValueError):
    """Raised when a layout input violates a precondition."""
