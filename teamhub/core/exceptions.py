"""
Error taxonomy shared by every module.

Services raise these; ``teamhub.main`` renders them as ``{"kind", "message"}``.
"""


class TeamhubError(Exception):
    kind = "Error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class ValidationError(TeamhubError):
    """Missing or malformed required input. Nothing was written."""
    kind = "ValidationError"
    status_code = 400


class NotFoundError(TeamhubError):
    kind = "NotFoundError"
    status_code = 404


class StorageError(TeamhubError):
    """The document store failed or was unreachable. Never retried."""
    kind = "StorageError"
    status_code = 503


class ExternalServiceError(TeamhubError):
    kind = "ExternalServiceError"
    status_code = 502
