import json
from typing import Any, Callable, Generator

import httpx
import pytest
import pytest_asyncio

from snipshare_executor.config import ExecutorConfig
from snipshare_executor.dispatcher import DispatcherAsync


class PistonStub:
    """Deterministic stand-in for the remote execution service."""

    def __init__(self, status_code: int = 200, body: Any = None, error: Exception | None = None):
        self.status_code = status_code
        self.body = body if body is not None else {"run": {"code": 0, "stdout": "", "stderr": "", "output": ""}}
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def config() -> ExecutorConfig:
    return ExecutorConfig(_env_file=None, api_key=None)


@pytest.fixture
def make_stub() -> Callable[..., PistonStub]:
    return PistonStub


@pytest.fixture
def stub() -> PistonStub:
    return PistonStub()


@pytest_asyncio.fixture
async def make_dispatcher(config: ExecutorConfig) -> Any:
    clients: list[httpx.AsyncClient] = []

    def _factory(piston_stub: PistonStub) -> DispatcherAsync:
        client = httpx.AsyncClient(transport=httpx.MockTransport(piston_stub))
        clients.append(client)
        return DispatcherAsync(config, client)

    yield _factory

    for client in clients:
        await client.aclose()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    for key in ("SNIPSHARE_API_KEY", "PISTON_API_KEY", "SNIPSHARE_PISTON_API_KEY", "SNIPSHARE_RUN_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)
    yield
