# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

import anyio
import httpx
from loguru import logger
from pydantic import ValidationError

from snipshare_executor.client import PistonClient
from snipshare_executor.config import ExecutorConfig
from snipshare_executor.diagnostics import enrich
from snipshare_executor.exceptions import RemoteServiceError, TransportError, UnsupportedLanguageError
from snipshare_executor.languages import LanguageDescriptor, get_language
from snipshare_executor.models import ExecutionRequest, ExecutionResult, PistonFile, PistonRequest, PistonResponse
from snipshare_executor.models.execution import MEMORY_UNREPORTED, MEMORY_ZERO
from snipshare_executor.normalization import normalize_source, normalize_stdin
from snipshare_executor.utils.audit import AuditLogger

INVALID_REQUEST_MESSAGE = "Invalid execution request: language and source code must be text"
NETWORK_ERROR_MESSAGE = "Network error: Failed to connect to execution service"
COMPILE_ERROR_PREFIX = "Compilation Error:\n"
UNKNOWN_COMPILE_ERROR = "Unknown compilation error"


def require_language(language: str) -> LanguageDescriptor:
    descriptor = get_language(language)
    if descriptor is None:
        raise UnsupportedLanguageError(language)
    return descriptor


def build_payload(descriptor: LanguageDescriptor, request: ExecutionRequest, config: ExecutorConfig) -> PistonRequest:
    """Shape a request for the remote service, applying language normalization."""
    return PistonRequest(
        language=descriptor.remote_id,
        version=descriptor.version,
        files=[PistonFile(name=descriptor.file_name, content=normalize_source(descriptor, request.source_code))],
        stdin=normalize_stdin(descriptor, request.stdin),
        compile_timeout=config.compile_timeout,
        run_timeout=config.run_timeout,
        compile_memory_limit=config.compile_memory_limit,
        run_memory_limit=config.run_memory_limit,
    )


def interpret(report: PistonResponse, elapsed_ms: int) -> ExecutionResult:
    """Turn a remote execution report into a normalized result.

    Compile failures take priority over the run phase; a run exit code of
    exactly 0 is success and anything else is a runtime failure.
    """
    compile_stage = report.compile
    if compile_stage is not None and compile_stage.code != 0:
        diagnostic = compile_stage.stderr or compile_stage.output or UNKNOWN_COMPILE_ERROR
        return ExecutionResult.failure(f"{COMPILE_ERROR_PREFIX}{diagnostic}", elapsed_ms, MEMORY_ZERO)

    run = report.run
    if run.code == 0:
        return ExecutionResult.ok(run.stdout or run.output, elapsed_ms)

    if run.code is None and run.signal:
        fallback = f"Process terminated by signal {run.signal}"
    else:
        fallback = f"Process exited with code {run.code}"
    message = run.stderr or run.output or fallback
    return ExecutionResult.failure(enrich(message), elapsed_ms, MEMORY_UNREPORTED)


class DispatcherAsync:
    """Async-native Execution Dispatcher (The Core).

    Holds no per-call state; concurrent dispatches are independent.
    """

    def __init__(
        self,
        config: ExecutorConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """Initializes the DispatcherAsync service.

        Args:
            config: Configuration for the remote service.
            client: Optional httpx.AsyncClient for connection pooling.
        """
        self.config = config or ExecutorConfig()
        self._internal_client = client is None
        self._client = client or httpx.AsyncClient()
        self._piston = PistonClient(self.config, self._client)
        self.audit = AuditLogger(enabled=self.config.enable_audit_logging)

    async def __aenter__(self) -> "DispatcherAsync":
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Closes the HTTP client if this dispatcher created it."""
        await self.aclose()

    async def aclose(self) -> None:
        if self._internal_client:
            await self._client.aclose()

    async def dispatch(self, language: str, source_code: str, stdin: str = "") -> ExecutionResult:
        """Runs source code on the remote service.

        Args:
            language: Canonical language id.
            source_code: The program text.
            stdin: Standard input for the program.

        Returns:
            ExecutionResult: The normalized outcome. Never raises for
            unsupported languages, remote failures or malformed responses.
        """
        try:
            request = ExecutionRequest(language=language, source_code=source_code, stdin=stdin)
        except ValidationError as e:
            logger.warning(f"Rejected execution request: {e}")
            return ExecutionResult.failure(INVALID_REQUEST_MESSAGE)
        return await self.dispatch_request(request)

    async def dispatch_request(self, request: ExecutionRequest) -> ExecutionResult:
        try:
            descriptor = require_language(request.language)
        except UnsupportedLanguageError as e:
            logger.warning(str(e))
            return ExecutionResult.failure(str(e))

        try:
            payload = build_payload(descriptor, request, self.config)
            self.audit.log_pre_execution(payload.files[0].content, descriptor.canonical_id)
            report, elapsed_ms = await self._piston.submit(payload)
            result = interpret(report, elapsed_ms)
        except RemoteServiceError as e:
            return ExecutionResult.failure(str(e), e.elapsed_ms, MEMORY_ZERO)
        except TransportError:
            return ExecutionResult.failure(NETWORK_ERROR_MESSAGE)
        except Exception as e:
            logger.exception(f"Unexpected failure dispatching {request.language} code: {e}")
            return ExecutionResult.failure(NETWORK_ERROR_MESSAGE)

        logger.info(
            f"Executed {descriptor.canonical_id} code: success={result.success} time={result.elapsed_time}"
        )
        return result


class Dispatcher:
    """Sync Facade for DispatcherAsync (The Facade).

    Each call runs in its own event loop via anyio.run with a fresh HTTP client.
    """

    def __init__(
        self,
        config: ExecutorConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initializes the Dispatcher facade.

        Args:
            config: Configuration for the remote service.
            transport: Optional httpx transport used by each call's client.
        """
        self.config = config or ExecutorConfig()
        self._transport = transport

    async def _dispatch(self, language: str, source_code: str, stdin: str) -> ExecutionResult:
        async with httpx.AsyncClient(transport=self._transport) as client:
            return await DispatcherAsync(self.config, client).dispatch(language, source_code, stdin)

    def dispatch(self, language: str, source_code: str, stdin: str = "") -> ExecutionResult:
        """Runs source code on the remote service synchronously.

        Args:
            language: Canonical language id.
            source_code: The program text.
            stdin: Standard input for the program.

        Returns:
            ExecutionResult: The normalized outcome.
        """
        return anyio.run(self._dispatch, language, source_code, stdin)


async def dispatch(
    language: str, source_code: str, stdin: str = "", config: ExecutorConfig | None = None
) -> ExecutionResult:
    """One-shot dispatch with a short-lived HTTP client."""
    async with DispatcherAsync(config) as dispatcher:
        return await dispatcher.dispatch(language, source_code, stdin)
