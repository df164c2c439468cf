class OPathInvalidOperationError(ValueError):
    """Raised when a path does not support the requested operation. Subclass of ValueError."""
    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)
