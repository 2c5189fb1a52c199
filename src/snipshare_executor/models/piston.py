# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

"""Wire models for the Piston remote execution API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class PistonFile(BaseModel):
    name: str
    content: str


class PistonRequest(BaseModel):
    """JSON body of ``POST /execute``."""

    language: str
    version: str
    files: list[PistonFile]
    stdin: str = ""
    compile_timeout: int
    run_timeout: int
    compile_memory_limit: int = -1
    run_memory_limit: int = -1


class PistonStage(BaseModel):
    """Report for one phase (compile or run) of a job.

    ``code`` is null when the process was killed by a signal; null streams
    are read as empty strings.
    """

    model_config = ConfigDict(extra="ignore")

    code: int | None = None
    signal: str | None = None
    stdout: str = ""
    stderr: str = ""
    output: str = ""

    @field_validator("stdout", "stderr", "output", mode="before")
    @classmethod
    def _null_stream_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class PistonResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    run: PistonStage
    compile: PistonStage | None = None
    language: str | None = None
    version: str | None = None
