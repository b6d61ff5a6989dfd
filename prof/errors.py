"""Defines the exceptions raised by the prof client."""


class ProfError(Exception):
    """Base class for every error raised by the client."""


class HttpError(ProfError):
    def __init__(self, message: str) -> None:
        super().__init__(f"HTTP request failed: {message}")
        self.message = message


class SerializationError(ProfError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Serialization error: {message}")
        self.message = message


class ServiceError(ProfError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Prof service error: {message}")
        self.message = message


class AuthError(ProfError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Authentication failed: {message}")
        self.message = message


class NotFoundError(ProfError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Not found: {message}")
        self.message = message


class ValidationError(ProfError):
    def __init__(self, errors: list[str]) -> None:
        super().__init__(f"Validation failed: {errors}")
        self.errors = list(errors)
