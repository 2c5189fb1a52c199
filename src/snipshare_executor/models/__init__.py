# src/snipshare_executor/models/__init__.py

"""
Data models for execution requests, results and the remote wire format.
"""

from .execution import ExecutionRequest, ExecutionResult
from .piston import PistonFile, PistonRequest, PistonResponse, PistonStage

__all__ = [
    "ExecutionRequest",
    "ExecutionResult",
    "PistonFile",
    "PistonRequest",
    "PistonResponse",
    "PistonStage",
]
