# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

import time

import httpx
from loguru import logger
from pydantic import ValidationError

from snipshare_executor.config import ExecutorConfig
from snipshare_executor.exceptions import NetworkError, RemoteServiceError, ResponseParseError
from snipshare_executor.models import PistonRequest, PistonResponse


class PistonClient:
    """HTTP transport for the Piston execute endpoint.

    Sends exactly one request per call and never retries.
    """

    def __init__(self, config: ExecutorConfig, client: httpx.AsyncClient):
        """Initializes the client.

        Args:
            config: Endpoint, credentials and request timeout.
            client: The httpx.AsyncClient used for the request.
        """
        self.config = config
        self._client = client

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if self.config.api_key:
            headers["Authorization"] = self.config.api_key
        return headers

    async def submit(self, payload: PistonRequest) -> tuple[PistonResponse, int]:
        """Post a job and return the parsed report with the call's elapsed time.

        The elapsed time covers only the HTTP exchange, not body parsing.

        Args:
            payload: The execute request body.

        Returns:
            tuple[PistonResponse, int]: The report and the elapsed milliseconds.

        Raises:
            NetworkError: If the request fails before a response arrives.
            RemoteServiceError: If the response status is not 2xx.
            ResponseParseError: If the body is not a valid execution report.
        """
        start = time.perf_counter()
        try:
            response = await self._client.post(
                str(self.config.endpoint),
                content=payload.model_dump_json(),
                headers=self._headers(),
                timeout=self.config.request_timeout,
            )
        except httpx.HTTPError as e:
            logger.error(f"Request to execution service failed: {e!r}")
            raise NetworkError(str(e)) from e
        elapsed_ms = int((time.perf_counter() - start) * 1000)

        if not response.is_success:
            logger.warning(f"Execution service returned {response.status_code} after {elapsed_ms}ms")
            raise RemoteServiceError(response.status_code, response.reason_phrase, elapsed_ms)

        try:
            report = PistonResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Malformed execution report: {e}")
            raise ResponseParseError(str(e)) from e

        logger.debug(f"Execution service responded in {elapsed_ms}ms")
        return report, elapsed_ms
