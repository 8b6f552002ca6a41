"""Structured failures raised by the validation gate."""
from __future__ import annotations

ErrorBody = str | dict[str, str]


class GateRejection(Exception):
    """A gate check refused the request.

    Attributes:
        status_code: HTTP status returned to the client.
        error: Either a plain message or a one-key mapping of field to message.
        check: Name of the check that failed, for logging.
    """

    def __init__(self, status_code: int, error: ErrorBody, check: str = "") -> None:
        self.status_code = status_code
        self.error = error
        self.check = check
        super().__init__(error if isinstance(error, str) else next(iter(error.values()), ""))

    def as_body(self) -> dict[str, ErrorBody]:
        """Return the JSON body sent to the client."""
        return {"error": self.error}
