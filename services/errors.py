class StoreError(Exception):
    """Base for failures a caller can act on. Carries the HTTP status it maps to."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(StoreError):
    status_code = 400


class NotFound(StoreError):
    status_code = 404


class Conflict(StoreError):
    status_code = 409
