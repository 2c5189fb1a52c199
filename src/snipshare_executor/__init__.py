# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

"""
snipshare-executor
"""

__version__ = "0.1.0"

from .config import ExecutorConfig
from .dispatcher import Dispatcher, DispatcherAsync, dispatch
from .languages import LANGUAGES, LanguageDescriptor, is_supported, supported_languages
from .models import ExecutionRequest, ExecutionResult
from .report import format_report
from .templates import starter_template

__all__ = [
    "Dispatcher",
    "DispatcherAsync",
    "ExecutionRequest",
    "ExecutionResult",
    "ExecutorConfig",
    "LANGUAGES",
    "LanguageDescriptor",
    "dispatch",
    "format_report",
    "is_supported",
    "starter_template",
    "supported_languages",
]
