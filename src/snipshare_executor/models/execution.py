# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

"""Data models for execution requests and their normalized outcome."""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

NO_OUTPUT_MESSAGE = "Program executed successfully (no output)"
MEMORY_UNREPORTED = "N/A"
MEMORY_ZERO = "0KB"


def format_elapsed(elapsed_ms: int) -> str:
    return f"{elapsed_ms}ms"


class ExecutionRequest(BaseModel):
    """A single request to run a source buffer; never persisted."""

    language: str = Field(..., description="Canonical language id.")
    source_code: str = Field(..., description="The source buffer as the user wrote it.")
    stdin: str = Field(default="", description="Standard input fed to the program.")

    @field_validator("stdin", mode="before")
    @classmethod
    def _missing_stdin_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ExecutionResult(BaseModel):
    """
    The normalized outcome returned to callers.

    Exactly one of ``output`` and ``error`` is non-empty, and ``success``
    tells which one.
    """

    success: bool = Field(..., description="Whether the program ran to a zero exit code.")
    output: str = Field(default="", description="Program stdout when successful.")
    error: str = Field(default="", description="Human-readable diagnostic when failed.")
    elapsed_time: str = Field(default="0ms", description="Wall-clock time of the remote call.")
    memory: str = Field(default=MEMORY_ZERO, description="Best-effort memory usage.")

    @model_validator(mode="after")
    def _check_outcome(self) -> "ExecutionResult":
        if self.success and (not self.output or self.error):
            raise ValueError("successful result requires output and no error")
        if not self.success and (not self.error or self.output):
            raise ValueError("failed result requires error and no output")
        return self

    @classmethod
    def ok(cls, output: str, elapsed_ms: int, memory: str = MEMORY_UNREPORTED) -> "ExecutionResult":
        return cls(
            success=True,
            output=output or NO_OUTPUT_MESSAGE,
            elapsed_time=format_elapsed(elapsed_ms),
            memory=memory,
        )

    @classmethod
    def failure(cls, error: str, elapsed_ms: int = 0, memory: str = MEMORY_ZERO) -> "ExecutionResult":
        return cls(success=False, error=error, elapsed_time=format_elapsed(elapsed_ms), memory=memory)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
