"""Calculator error types."""


class InvalidInputError(ValueError):
    """Raised when a computation is requested with out-of-range input.

    Attributes:
        field: Name of the offending input field, e.g. "annual_income".
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
