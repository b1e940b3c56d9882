"""CLI session state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .history import HistoryStore
from .output import emit_error, emit_result
from .reply import ErrorValue, Mode
from .transport import DEFAULT_POOL_SIZE, DEFAULT_TIMEOUT, RedisTransport, TransportError

LOGGER = logging.getLogger("rediscli.context")

MAX_DB_INDEX = 15

TransportFactory = Callable[..., Any]


@dataclass
class CliContext:
    """Holds connection settings and the mutable session state."""

    host: str = "127.0.0.1"
    port: str = "6379"
    unix_socket: str = ""
    password: str = ""
    db: int = 0
    mode: Mode = Mode.STANDARD
    tls: bool = False
    pool_size: int = DEFAULT_POOL_SIZE
    dial_timeout: float = DEFAULT_TIMEOUT
    read_timeout: float = DEFAULT_TIMEOUT
    write_timeout: float = DEFAULT_TIMEOUT
    history: HistoryStore = field(default_factory=lambda: HistoryStore(None))
    transport_factory: TransportFactory = RedisTransport
    _transport: Optional[Any] = field(default=None, init=False, repr=False)

    @property
    def address(self) -> str:
        if self.unix_socket:
            return self.unix_socket
        return f"{self.host}:{self.port}"

    @property
    def prompt(self) -> str:
        if 0 < self.db <= MAX_DB_INDEX:
            return f"{self.address}[{self.db}]> "
        return f"{self.address}> "

    @property
    def transport(self) -> Optional[Any]:
        return self._transport

    def open_transport(self, host: str, port: str, *, unix_socket: str = "", password: str = "") -> Any:
        """Build a transport without adopting it."""
        return self.transport_factory(
            host=host,
            port=port,
            unix_socket=unix_socket,
            password=password,
            db=0,
            tls=self.tls,
            pool_size=self.pool_size,
            dial_timeout=self.dial_timeout,
            read_timeout=self.read_timeout,
            write_timeout=self.write_timeout,
        )

    def ensure_transport(self) -> Any:
        """Create the transport on first use, then check it and select the initial db."""
        if self._transport is not None:
            return self._transport
        transport = self.open_transport(
            self.host,
            self.port,
            unix_socket=self.unix_socket,
            password=self.password,
        )
        self._transport = transport
        LOGGER.debug("connecting to %s", self.address)
        try:
            transport.ping()
        except TransportError as exc:
            emit_error(str(exc))
        self._select_initial_db(transport)
        return transport

    def _select_initial_db(self, transport: Any) -> None:
        if self.db == 0:
            return
        if self.db < 0 or self.db > MAX_DB_INDEX:
            emit_result("index out of range, should less than 16")
            self.db = 0
            return
        try:
            reply = transport.execute("SELECT", self.db)
        except TransportError as exc:
            emit_error(str(exc))
            return
        if isinstance(reply, ErrorValue):
            emit_error(reply.message)
            return
        transport.remember_db(self.db)

    def adopt(self, transport: Any, *, host: str, port: str, password: str = "") -> None:
        """Replace the current transport wholesale."""
        self.disconnect()
        self._transport = transport
        self.host = host
        self.port = port
        self.unix_socket = ""
        self.password = password
        self.db = 0

    def set_db(self, index: int) -> None:
        self.db = index
        if self._transport is not None:
            self._transport.remember_db(index)

    def disconnect(self) -> None:
        transport = self._transport
        if transport is None:
            return
        try:
            transport.close()
        except Exception as exc:
            LOGGER.debug("transport close failed: %s", exc)
        self._transport = None
