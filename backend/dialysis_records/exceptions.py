from typing import Optional


class ClinicError(Exception):
    status_code = 500
    code = "ServerError"

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict:
        body = {"error": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(ClinicError):
    status_code = 400
    code = "ValidationError"


class DuplicateEmail(ClinicError):
    status_code = 400
    code = "DuplicateEmail"


class InvalidCredentials(ClinicError):
    status_code = 400
    code = "InvalidCredentials"


class Unauthorized(ClinicError):
    status_code = 401
    code = "Unauthorized"


class NotFound(ClinicError):
    status_code = 404
    code = "NotFound"


class ForeignKeyViolation(ClinicError):
    status_code = 400
    code = "ForeignKeyViolation"


class PersistenceError(ClinicError):
    """Any other database failure. The driver message goes back in ``details``."""
    status_code = 500
    code = "PersistenceError"
