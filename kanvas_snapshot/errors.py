"""Error types raised while creating a design and dispatching its snapshot."""


class KanvasSnapshotError(Exception):
    """Base class for every failure of a snapshot invocation."""
    pass


class InvalidEmailFormat(KanvasSnapshotError):
    """Raised when the notification address is not a valid mailbox."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"invalid email format: {email!r}")


class HTTPRequestFailed(KanvasSnapshotError):
    """Raised when a request could not be built or sent (URL, connection, TLS, timeout)."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"HTTP request to {url} failed: {reason}")


class UnexpectedResponseCode(KanvasSnapshotError):
    """Raised when an API answers with a status code it should not."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"unexpected response code {status_code}, body: {body}")


class DecodingFailed(KanvasSnapshotError):
    """Raised when a response body is malformed or lacks expected fields."""

    def __init__(self, reason: str, body: str = ""):
        self.reason = reason
        self.body = body
        message = f"failed to decode API response: {reason}"
        if body:
            message += f", body: {body}"
        super().__init__(message)


class WorkflowAuthFailed(KanvasSnapshotError):
    """Raised when GitHub rejects the workflow access token (401/403)."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"GitHub workflow authentication failed ({status_code}), "
            f"check the workflow access token. Response: {body}"
        )


class DesignCreationFailed(KanvasSnapshotError):
    """Wraps any failure of the design import step."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"error creating Meshery design: {cause}")


class SnapshotGenerationFailed(KanvasSnapshotError):
    """Wraps any failure of the snapshot dispatch step."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"error generating Kanvas snapshot: {cause}")
