"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidArgument(DomainError):
    """Raised when a caller violates the optimizer's input contract."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"[{field}] {message}")
