"""
Execute Options DTO

Caller-facing options of the execution entrypoint.
"""

from typing import Optional

from pydantic import BaseModel, Field

from judge_sandbox.domain.value_objects import ExecutionRequest


class ExecuteCodeOptions(BaseModel):
    """
    Options for one code execution.

    The language is detected from the code when omitted or when
    ``auto_detect`` is set.
    """

    code: str = Field(..., description="Source code to execute")
    language: Optional[str] = Field(None, description="Language name or alias")
    input: Optional[str] = Field(None, description="Standard input")
    time_limit: Optional[float] = Field(None, gt=0, description="CPU time limit in seconds")
    memory_limit: Optional[int] = Field(None, gt=0, description="Memory limit in MB")
    user_id: Optional[str] = Field(None, description="Caller identity, used for metrics")
    auto_detect: bool = Field(False, description="Detect the language even when one is given")

    def to_domain(self, language: str) -> ExecutionRequest:
        """Convert to a domain ExecutionRequest for the resolved language."""
        return ExecutionRequest(
            code=self.code,
            language=language,
            stdin=self.input,
            time_limit=self.time_limit,
            memory_limit=self.memory_limit,
        )
