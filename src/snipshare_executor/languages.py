# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

"""Static table of languages the remote execution service can run."""

from pydantic import BaseModel, ConfigDict

WILDCARD_VERSION = "*"


class LanguageDescriptor(BaseModel):
    """Describes how a language is submitted to the remote service.

    Attributes:
        canonical_id: The identifier the application uses for the language.
        remote_id: The identifier the remote service expects.
        file_extension: Extension of the synthetic source file.
        remote_version: Pinned toolchain version, or None for the latest.
        entry_point: Fixed name the public entry type must carry, if any.
        terminate_stdin: Whether non-empty stdin must end with a newline.
    """

    model_config = ConfigDict(frozen=True)

    canonical_id: str
    remote_id: str
    file_extension: str
    remote_version: str | None = None
    entry_point: str | None = None
    terminate_stdin: bool = False

    @property
    def file_name(self) -> str:
        return f"main.{self.file_extension}"

    @property
    def version(self) -> str:
        return self.remote_version or WILDCARD_VERSION


def _table(*descriptors: LanguageDescriptor) -> dict[str, LanguageDescriptor]:
    table: dict[str, LanguageDescriptor] = {}
    for descriptor in descriptors:
        if descriptor.canonical_id in table:
            raise ValueError(f"Duplicate language id: {descriptor.canonical_id}")
        table[descriptor.canonical_id] = descriptor
    return table


LANGUAGES: dict[str, LanguageDescriptor] = _table(
    LanguageDescriptor(canonical_id="javascript", remote_id="javascript", file_extension="js", remote_version="18.15.0"),
    LanguageDescriptor(canonical_id="python", remote_id="python", file_extension="py", remote_version="3.10.0"),
    LanguageDescriptor(
        canonical_id="java",
        remote_id="java",
        file_extension="java",
        remote_version="15.0.2",
        entry_point="Main",
        terminate_stdin=True,
    ),
    LanguageDescriptor(canonical_id="cpp", remote_id="cpp", file_extension="cpp", remote_version="10.2.0"),
    LanguageDescriptor(canonical_id="c", remote_id="c", file_extension="c", remote_version="10.2.0"),
    LanguageDescriptor(canonical_id="csharp", remote_id="csharp", file_extension="cs", remote_version="6.12.0"),
    LanguageDescriptor(canonical_id="ruby", remote_id="ruby", file_extension="rb", remote_version="3.0.1"),
    LanguageDescriptor(canonical_id="go", remote_id="go", file_extension="go", remote_version="1.16.2"),
    LanguageDescriptor(canonical_id="rust", remote_id="rust", file_extension="rs", remote_version="1.68.2"),
    LanguageDescriptor(canonical_id="typescript", remote_id="typescript", file_extension="ts", remote_version="5.0.3"),
    LanguageDescriptor(canonical_id="php", remote_id="php", file_extension="php", remote_version="8.2.3"),
)


def get_language(language: str) -> LanguageDescriptor | None:
    """Look up a descriptor by exact, case-sensitive canonical id."""
    return LANGUAGES.get(language)


def is_supported(language: str) -> bool:
    return language in LANGUAGES


def supported_languages() -> list[str]:
    """Canonical ids in table order, for populating a language selector."""
    return list(LANGUAGES)
