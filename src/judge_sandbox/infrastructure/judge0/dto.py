"""
Judge0 API data transfer objects.

Request and response models of the Judge0 submissions endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Judge0SubmissionRequest(BaseModel):
    """Body of POST /submissions."""

    source_code: str = Field(..., description="Program source")
    language_id: int = Field(..., description="Judge0 language identifier")
    stdin: str = Field(default="", description="Standard input")
    cpu_time_limit: float = Field(..., gt=0, description="CPU time limit in seconds")
    memory_limit: int = Field(..., gt=0, description="Memory limit in kilobytes")


class Judge0SubmissionResponse(BaseModel):
    """Response of POST /submissions with wait=false."""

    token: str


class Judge0Status(BaseModel):
    id: int
    description: str = ""


class Judge0StatusResponse(BaseModel):
    """Response of GET /submissions/{token}."""

    stdout: Optional[str] = None
    stderr: Optional[str] = None
    compile_output: Optional[str] = None
    message: Optional[str] = None
    status: Judge0Status
    time: Optional[str] = Field(None, description="Wall time in seconds, as a decimal string")
    memory: Optional[int] = Field(None, description="Memory in kilobytes")
    exit_code: Optional[int] = None
