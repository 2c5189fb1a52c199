# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

from typing import Any

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from snipshare_executor.utils.secrets import SecretsIntegrator

PISTON_EXECUTE_URL = "https://emkc.org/api/v2/piston/execute"


class SecretsSettingsSource(PydanticBaseSettingsSource):
    """
    Custom Pydantic Settings Source that resolves credentials through SecretsIntegrator.
    """

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        # Unused because __call__ returns the full dict, but required by the ABC.
        return None, field_name, False  # pragma: no cover

    def __call__(self) -> dict[str, Any]:
        secrets_reader = SecretsIntegrator()
        secrets: dict[str, Any] = {}

        # Config Field -> secret key
        mapping = {
            "api_key": "PISTON_API_KEY",
        }

        for field, key in mapping.items():
            val = secrets_reader.get_secret(key)
            if val:
                secrets[field] = val

        return secrets


class ExecutorConfig(BaseSettings):
    """
    Configuration for the remote execution dispatcher.

    Timeouts sent to the remote service are in milliseconds; ``request_timeout``
    bounds the local HTTP call and is in seconds.
    """

    endpoint: HttpUrl = HttpUrl(PISTON_EXECUTE_URL)
    user_agent: str = "SnipShare/1.0"
    api_key: str | None = None

    compile_timeout: int = Field(default=10_000, gt=0)
    run_timeout: int = Field(default=5_000, gt=0)
    # -1 leaves memory enforcement to the remote service
    compile_memory_limit: int = -1
    run_memory_limit: int = -1

    request_timeout: float = Field(default=20.0, gt=0)
    enable_audit_logging: bool = True

    model_config = SettingsConfigDict(
        env_prefix="SNIPSHARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            SecretsSettingsSource(settings_cls),
            file_secret_settings,
        )
