# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

"""Errors raised inside the executor.

None of these escape ``DispatcherAsync.dispatch``; they are converted to a
failed ``ExecutionResult`` at that boundary.
"""


class ExecutorError(Exception):
    """Base class for executor failures."""


class UnsupportedLanguageError(ExecutorError, ValueError):
    def __init__(self, language: str):
        super().__init__(f"Unsupported language: {language}")
        self.language = language


class TransportError(ExecutorError):
    """The remote call did not produce a usable response."""


class RemoteServiceError(TransportError):
    """The remote service answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str, elapsed_ms: int):
        super().__init__(f"Remote service error {status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason
        self.elapsed_ms = elapsed_ms


class NetworkError(TransportError):
    """The request could not be sent or no response was received."""


class ResponseParseError(TransportError):
    """The response body was not a valid execution report."""
