"""
Judge0 status codes and their mapping onto ExecutionStatus.
"""

from types import MappingProxyType
from typing import Mapping

from judge_sandbox.domain.value_objects import ExecutionStatus

# 1 = In Queue, 2 = Processing; anything above is terminal
IN_PROGRESS_THRESHOLD = 2

STATUS_MAP: Mapping[int, ExecutionStatus] = MappingProxyType({
    3: ExecutionStatus.SUCCESS,              # Accepted
    4: ExecutionStatus.RUNTIME_ERROR,        # Wrong Answer
    5: ExecutionStatus.TIME_LIMIT_EXCEEDED,
    6: ExecutionStatus.COMPILATION_ERROR,
    7: ExecutionStatus.RUNTIME_ERROR,        # SIGSEGV
    8: ExecutionStatus.RUNTIME_ERROR,        # SIGXFSZ
    9: ExecutionStatus.RUNTIME_ERROR,        # SIGFPE
    10: ExecutionStatus.RUNTIME_ERROR,       # SIGABRT
    11: ExecutionStatus.RUNTIME_ERROR,       # NZEC
    12: ExecutionStatus.RUNTIME_ERROR,       # Other
    13: ExecutionStatus.INTERNAL_ERROR,
    14: ExecutionStatus.INTERNAL_ERROR,      # Exec Format Error
})


def is_terminal(status_id: int) -> bool:
    return status_id > IN_PROGRESS_THRESHOLD


def map_status(status_id: int) -> ExecutionStatus:
    """Map a Judge0 status id onto ExecutionStatus; unknown ids are internal errors."""
    if not is_terminal(status_id):
        return ExecutionStatus.PENDING
    return STATUS_MAP.get(status_id, ExecutionStatus.INTERNAL_ERROR)
