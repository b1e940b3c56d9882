"""
Pytest configuration and fixtures for rediscli tests.
"""
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
PYTHON_SRC = REPO_ROOT / "python"
if str(PYTHON_SRC) not in sys.path:
    sys.path.append(str(PYTHON_SRC))

from rediscli.context import CliContext
from rediscli.history import HistoryStore
from rediscli.reply import Text
from rediscli.transport import TransportError


class StubTransport:
    """Stands in for RedisTransport; replies are consumed in order."""

    def __init__(
        self,
        replies: Optional[List[Any]] = None,
        *,
        ping_error: Optional[str] = None,
        auth_error: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        self.kwargs: Dict[str, Any] = kwargs
        self.replies = list(replies or [])
        self.ping_error = ping_error
        self.auth_error = auth_error
        self.commands: List[List[Any]] = []
        self.pings = 0
        self.auths: List[str] = []
        self.remembered_db: Optional[int] = None
        self.closed = False

    def execute(self, *args: Any) -> Any:
        self.commands.append(list(args))
        if not self.replies:
            return Text("OK")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def ping(self) -> None:
        self.pings += 1
        if self.ping_error:
            raise TransportError(self.ping_error)
        # the connection handshake authenticates before the first command
        password = self.kwargs.get("password")
        if password and not self.auths:
            self.auths.append(password)
            if self.auth_error:
                raise TransportError(self.auth_error)

    def remember_db(self, index: int) -> None:
        self.remembered_db = index

    def close(self) -> None:
        self.closed = True


class TransportFactory:
    """Records every transport the context builds."""

    def __init__(self) -> None:
        self.created: List[StubTransport] = []
        self.replies: List[Any] = []
        self.ping_error: Optional[str] = None
        self.auth_error: Optional[str] = None

    def __call__(self, **kwargs: Any) -> StubTransport:
        transport = StubTransport(
            self.replies,
            ping_error=self.ping_error,
            auth_error=self.auth_error,
            **kwargs,
        )
        self.replies = []
        self.created.append(transport)
        return transport


@pytest.fixture
def factory() -> TransportFactory:
    return TransportFactory()


@pytest.fixture
def ctx(factory: TransportFactory) -> CliContext:
    return CliContext(transport_factory=factory, history=HistoryStore(None))
