from __future__ import annotations

from typing import Any


class AcademyError(Exception):
    """Base for errors that map onto a structured JSON response."""

    code = "internal_error"
    status_code = 500

    def __init__(self, message: str, *, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(AcademyError):
    code = "validation_error"
    status_code = 400


class TransactionFailure(AcademyError):
    code = "transaction_failure"
    status_code = 500


class ConnectionAcquisitionFailure(AcademyError):
    code = "store_unavailable"
    status_code = 503
