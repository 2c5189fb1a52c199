# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

"""Classification and enrichment of runtime diagnostics from the remote service.

Matching is a heuristic over free text; the remote service does not guarantee
its wording, so rules may stop matching if upstream messages change.
"""

from enum import Enum

ORIGINAL_ERROR_SEPARATOR = "\n\nOriginal error:\n"


class DiagnosticKind(str, Enum):
    MISSING_INPUT = "missing_input"
    INPUT_MISMATCH = "input_mismatch"
    GENERIC = "generic"


# Evaluated in order; the first matching signature wins.
SIGNATURES: list[tuple[DiagnosticKind, str]] = [
    (DiagnosticKind.MISSING_INPUT, "NoSuchElementException"),
    (DiagnosticKind.INPUT_MISMATCH, "InputMismatchException"),
]

GUIDANCE: dict[DiagnosticKind, str] = {
    DiagnosticKind.MISSING_INPUT: (
        "❌ Input Missing Error:\n"
        "Your code is trying to read input, but no input was provided.\n"
        "\n"
        "🔧 Quick fixes:\n"
        '1. Add input in the "Input" section below the code editor\n'
        '2. For two integers, try: "5 10" or "5\\n10"\n'
        "3. Make sure you provide enough input values for all Scanner.nextInt() calls"
    ),
    DiagnosticKind.INPUT_MISMATCH: (
        "❌ Input Format Error:\n"
        "The input provided does not match the type your code tried to read.\n"
        "\n"
        "💡 Common fixes:\n"
        '- For integers: Use space or newline separation (e.g., "5 10" or "5\\n10")\n'
        "- For arrays: Put size on first line, elements on second line\n"
        "- Check if your input matches what Scanner expects"
    ),
}


def classify(message: str) -> DiagnosticKind:
    for kind, signature in SIGNATURES:
        if signature in message:
            return kind
    return DiagnosticKind.GENERIC


def enrich(message: str) -> str:
    """Replace recognized runtime failures with remediation guidance.

    The original message is kept beneath a separator. Unrecognized messages
    are returned unchanged.
    """
    guidance = GUIDANCE.get(classify(message))
    if guidance is None:
        return message
    return f"{guidance}{ORIGINAL_ERROR_SEPARATOR}{message}"
