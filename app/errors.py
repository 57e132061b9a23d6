"""Domain errors raised by services and surfaced by the API layer."""


class NotFoundError(Exception):
    """Referenced group, keyword or domain does not exist."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Input rejected before touching the store."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)
