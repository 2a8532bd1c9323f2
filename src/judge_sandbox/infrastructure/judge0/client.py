"""
Judge0 executor

Implements ICodeExecutorPort on top of the Judge0 HTTP API:
submit with wait=false, poll the submission token until it reaches a
terminal status, then map the provider response onto ExecutionResult.
"""

import asyncio
from typing import Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from judge_sandbox.domain.languages import (
    get_all_languages,
    get_language_config,
    get_language_names,
    normalize_language,
)
from judge_sandbox.domain.ports import ICodeExecutorPort
from judge_sandbox.domain.services.typescript_handler import handle_typescript_execution
from judge_sandbox.domain.value_objects import (
    ExecutionRequest,
    ExecutionResult,
    LanguageConfig,
)
from judge_sandbox.errors import UnsupportedLanguageError
from judge_sandbox.infrastructure.config import Settings, get_settings
from judge_sandbox.infrastructure.judge0.dto import (
    Judge0StatusResponse,
    Judge0SubmissionRequest,
    Judge0SubmissionResponse,
)
from judge_sandbox.infrastructure.judge0.errors import (
    Judge0ConnectionError,
    Judge0Error,
    Judge0MalformedResponseError,
    Judge0PollTimeoutError,
    Judge0ResponseError,
    Judge0TimeoutError,
)
from judge_sandbox.infrastructure.judge0.status import is_terminal, map_status
from judge_sandbox.infrastructure.logging import get_logger


logger = get_logger(__name__)


class Judge0Executor(ICodeExecutorPort):
    """
    Code executor backed by a hosted or self-hosted Judge0 instance.

    Polling uses a fixed interval and a hard attempt ceiling, with no
    backoff. The ceiling bounds how long this client waits for the judge,
    independent of the program's own time limit.
    """

    executor_type = "judge0"

    def __init__(
        self,
        base_url: Optional[str] = None,
        auth_token: Optional[str] = None,
        rapidapi_key: Optional[str] = None,
        rapidapi_host: Optional[str] = None,
        timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
        max_poll_attempts: Optional[int] = None,
        client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the Judge0 executor.

        Args:
            base_url: Judge0 API base URL
            auth_token: X-Auth-Token for self-hosted instances
            rapidapi_key: X-RapidAPI-Key for the marketplace endpoint
            rapidapi_host: X-RapidAPI-Host for the marketplace endpoint
            timeout: Timeout of each HTTP call in seconds
            poll_interval: Delay between status polls in seconds
            max_poll_attempts: Status polls before giving up
            client: Pre-built HTTP client (ownership stays with the caller)
            settings: Settings used for any argument left as None
        """
        settings = settings or get_settings()
        self._base_url = (base_url or settings.judge0_base_url).rstrip("/")
        self._auth_token = auth_token or settings.judge0_auth_token
        self._rapidapi_key = rapidapi_key or settings.judge0_rapidapi_key
        self._rapidapi_host = rapidapi_host or settings.judge0_rapidapi_host
        self._timeout = timeout if timeout is not None else settings.request_timeout
        self._poll_interval = (
            poll_interval if poll_interval is not None else settings.poll_interval_seconds
        )
        self._max_poll_attempts = (
            max_poll_attempts if max_poll_attempts is not None else settings.max_poll_attempts
        )
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._auth_token:
            headers["X-Auth-Token"] = self._auth_token
        if self._rapidapi_key:
            headers["X-RapidAPI-Key"] = self._rapidapi_key
        if self._rapidapi_host:
            headers["X-RapidAPI-Host"] = self._rapidapi_host
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        """Get or lazily create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this executor created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def get_supported_languages(self) -> List[LanguageConfig]:
        return get_all_languages()

    def is_language_supported(self, language: str) -> bool:
        return get_language_config(language) is not None

    async def execute(self, request: ExecutionRequest) -> ExecutionResult:
        """
        Execute code on Judge0.

        Raises:
            UnsupportedLanguageError: Before any network call, when the
                language is not registered

        Returns:
            ExecutionResult; transport and provider failures are returned
            as INTERNAL_ERROR results
        """
        code, config = self._resolve(request)

        log = logger.bind(language=config.name, judge_id=config.judge_id)
        try:
            token = await self._submit_code(request, code, config)
            log = log.bind(token=token)
            log.info("Submission accepted")

            status = await self._poll_for_result(token)
            result = self._transform_result(status)
            log.info(
                "Execution finished",
                status=result.status.value,
                execution_time_ms=result.execution_time_ms,
                memory_used_kb=result.memory_used_kb,
            )
            return result

        except Judge0Error as e:
            log.warning("Judge0 execution failed", error=str(e), error_type=type(e).__name__)
            return ExecutionResult.internal_error(str(e))

        except Exception as e:
            log.exception("Unexpected error during Judge0 execution", error=str(e))
            return ExecutionResult.internal_error(str(e) or type(e).__name__)

    def _resolve(self, request: ExecutionRequest) -> Tuple[str, LanguageConfig]:
        """Normalize the language, degrade TypeScript and look up the config."""
        language = normalize_language(request.language)
        if get_language_config(language) is None:
            raise UnsupportedLanguageError(request.language, get_language_names())

        code, language = handle_typescript_execution(request.code, language)
        if code != request.code:
            logger.debug("Degraded TypeScript to JavaScript", original_language=request.language)

        return code, get_language_config(language)

    async def _submit_code(
        self,
        request: ExecutionRequest,
        code: str,
        config: LanguageConfig,
    ) -> str:
        """
        Submit code without waiting for execution.

        Returns:
            Opaque submission token
        """
        submission = Judge0SubmissionRequest(
            source_code=code,
            language_id=config.judge_id,
            stdin=request.stdin or "",
            cpu_time_limit=request.time_limit or config.default_time_limit,
            # MB to KB
            memory_limit=(request.memory_limit or config.default_memory_limit) * 1024,
        )

        response = await self._send(
            "POST",
            "/submissions",
            operation="submit code",
            params={"base64_encoded": "false", "wait": "false"},
            json=submission.model_dump(),
        )
        try:
            return Judge0SubmissionResponse.model_validate(response.json()).token
        except (ValueError, ValidationError) as e:
            raise Judge0MalformedResponseError("submit code", str(e))

    async def _poll_for_result(self, token: str) -> Judge0StatusResponse:
        """
        Poll the submission until its status id passes the in-progress threshold.

        Raises:
            Judge0PollTimeoutError: If no terminal status after max attempts
        """
        for attempt in range(1, self._max_poll_attempts + 1):
            response = await self._send(
                "GET",
                f"/submissions/{token}",
                operation="get submission status",
                params={"base64_encoded": "false", "fields": "*"},
            )
            try:
                status = Judge0StatusResponse.model_validate(response.json())
            except (ValueError, ValidationError) as e:
                raise Judge0MalformedResponseError("get submission status", str(e))

            logger.debug(
                "Polled submission",
                token=token,
                attempt=attempt,
                status_id=status.status.id,
                status_description=status.status.description,
            )

            if is_terminal(status.status.id):
                return status

            if attempt < self._max_poll_attempts:
                await asyncio.sleep(self._poll_interval)

        raise Judge0PollTimeoutError(token, self._max_poll_attempts)

    async def _send(self, method: str, path: str, operation: str, **kwargs) -> httpx.Response:
        """Send one request, translating httpx failures into Judge0 errors."""
        client = self._get_client()
        try:
            response = await client.request(
                method, f"{self._base_url}{path}", headers=self._headers(), **kwargs
            )
        except httpx.TimeoutException:
            raise Judge0TimeoutError(self._base_url, self._timeout)
        except httpx.TransportError as e:
            raise Judge0ConnectionError(self._base_url, str(e))

        if not response.is_success:
            raise Judge0ResponseError(operation, response.status_code, response.text)
        return response

    @staticmethod
    def _transform_result(status: Judge0StatusResponse) -> ExecutionResult:
        """Map a terminal Judge0 response onto ExecutionResult."""
        try:
            # Judge0 reports seconds
            execution_time_ms = float(status.time) * 1000 if status.time else 0.0
        except ValueError:
            raise Judge0MalformedResponseError(
                "read execution time", f"invalid time value {status.time!r}"
            )

        return ExecutionResult(
            stdout=status.stdout or "",
            stderr=status.stderr or status.compile_output or "",
            exit_code=status.exit_code or 0,
            execution_time_ms=execution_time_ms,
            memory_used_kb=status.memory or 0,
            status=map_status(status.status.id),
            error=status.message or None,
        )
