"""Domain exceptions."""


class InvalidInput(ValueError):
    """Raised when a pricing input is negative or not a finite number.

    Attributes:
        field: Name of the offending input (e.g. "width_mm").
        value: The rejected value.
    """

    def __init__(self, field: str, value: object, reason: str = "is invalid") -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field} {reason} (got {value!r})")
