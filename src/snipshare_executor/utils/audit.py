import hashlib

from loguru import logger


class AuditLogger:
    """
    Records execution attempts without retaining the submitted source.
    """

    def __init__(self, service_name: str = "snipshare-executor", enabled: bool = True):
        self.service_name = service_name
        self.enabled = enabled

    def log_pre_execution(self, code: str, language: str) -> str:
        """
        Log the code execution attempt. Returns a hash of the code.
        """
        code_hash = hashlib.sha256(code.encode("utf-8")).hexdigest()

        if self.enabled:
            logger.bind(
                event_type="EXECUTION_START",
                service=self.service_name,
                language=language,
                code_hash=code_hash,
                code_length=len(code),
            ).info(f"Submitting {language} code for remote execution")

        return code_hash
