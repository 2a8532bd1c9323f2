"""
Judge0 transport and provider errors.

Raised inside the Judge0 adapter and converted into INTERNAL_ERROR results
before they reach callers.
"""


class Judge0Error(Exception):
    """Base class for Judge0 communication errors."""

    pass


class Judge0ConnectionError(Judge0Error):
    """Could not connect to the judge."""

    def __init__(self, base_url: str, reason: str = ""):
        self.base_url = base_url
        self.reason = reason
        super().__init__(f"Failed to connect to judge at {base_url}: {reason}")


class Judge0TimeoutError(Judge0Error):
    """A single HTTP call to the judge timed out."""

    def __init__(self, base_url: str, timeout: float):
        self.base_url = base_url
        self.timeout = timeout
        super().__init__(f"Judge at {base_url} timed out after {timeout}s")


class Judge0ResponseError(Judge0Error):
    """The judge answered with a non-2xx status."""

    def __init__(self, operation: str, status_code: int, message: str = ""):
        self.operation = operation
        self.status_code = status_code
        self.message = message
        super().__init__(f"Failed to {operation}: {status_code} {message}".rstrip())


class Judge0MalformedResponseError(Judge0Error):
    """The judge answered with a body that does not match its API."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Malformed judge response while trying to {operation}: {reason}")


class Judge0PollTimeoutError(Judge0Error):
    """The submission did not reach a terminal status within the poll budget."""

    def __init__(self, token: str, attempts: int):
        self.token = token
        self.attempts = attempts
        super().__init__(
            f"Execution timeout: result for submission {token} not available "
            f"after {attempts} attempts"
        )
