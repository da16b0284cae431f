MISSING_VALUE_MESSAGE = "Cannot create a barcode without value"


class InvalidArgument(ValueError):
    """Raised when a barcode is created or re-normalized from a missing value.

    Subclasses ValueError so pydantic reports it as a regular validation error
    when a Barcode field is validated.
    """

    def __init__(self, message: str = MISSING_VALUE_MESSAGE) -> None:
        super().__init__(message)
