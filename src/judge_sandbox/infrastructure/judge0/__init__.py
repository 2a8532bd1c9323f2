"""
Judge0 adapter

Executes code on a Judge0 instance over HTTP.
"""
from judge_sandbox.infrastructure.judge0.client import Judge0Executor
from judge_sandbox.infrastructure.judge0.errors import (
    Judge0ConnectionError,
    Judge0Error,
    Judge0MalformedResponseError,
    Judge0PollTimeoutError,
    Judge0ResponseError,
    Judge0TimeoutError,
)
from judge_sandbox.infrastructure.judge0.status import IN_PROGRESS_THRESHOLD, map_status

__all__ = [
    "Judge0Executor",
    "Judge0Error",
    "Judge0ConnectionError",
    "Judge0TimeoutError",
    "Judge0ResponseError",
    "Judge0MalformedResponseError",
    "Judge0PollTimeoutError",
    "IN_PROGRESS_THRESHOLD",
    "map_status",
]
