# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

import re

from snipshare_executor.languages import LanguageDescriptor

PUBLIC_CLASS_PATTERN = re.compile(r"public\s+class\s+\w+")


def normalize_source(descriptor: LanguageDescriptor, source_code: str) -> str:
    """Rename public class declarations to the descriptor's entry point.

    The remote service always names the submitted file ``main.<ext>``, and
    languages with an entry point require the public type to match it.
    """
    if descriptor.entry_point is None:
        return source_code
    return PUBLIC_CLASS_PATTERN.sub(f"public class {descriptor.entry_point}", source_code)


def normalize_stdin(descriptor: LanguageDescriptor, stdin: str) -> str:
    """Terminate the last line of stdin so blocking token reads can complete."""
    if descriptor.terminate_stdin and stdin and not stdin.endswith("\n"):
        return stdin + "\n"
    return stdin
