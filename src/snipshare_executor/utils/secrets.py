import os

from loguru import logger


class SecretsIntegrator:
    """
    Reads secrets from Environment Variables.
    Falls back to the SNIPSHARE_ prefixed name when the bare key is unset.
    """

    prefix = "SNIPSHARE_"

    def get_secret(self, key: str) -> str | None:
        """
        Fetch a secret, or None if it is not configured.
        """
        val = os.getenv(key)
        if not val:
            val = os.getenv(f"{self.prefix}{key}")

        if not val:
            logger.debug(f"Secret {key} not found in environment.")

        return val
