"""redis-py transport used by the CLI."""

from __future__ import annotations

import logging
from typing import Any, Optional

import redis
from redis._parsers import _RESP2Parser
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import InvalidResponse, RedisError, ResponseError

from .reply import ErrorValue, Reply, from_redis

LOGGER = logging.getLogger("rediscli.transport")

DEFAULT_POOL_SIZE = 3
DEFAULT_TIMEOUT = 10.0


class TransportError(RuntimeError):
    """Raised when a command cannot be delivered or its reply cannot be read."""


class StatusReplyParser(_RESP2Parser):
    """RESP2 parser that keeps status replies apart from bulk strings.

    Status replies (``+OK``) are returned as ``str`` while bulk strings stay
    ``bytes``; error replies keep their full text including the error code.
    """

    def _read_response(self, disable_decoding=False, **kwargs):
        # newer redis-py releases pass a read timeout through to the buffer
        raw = self._buffer.readline(**kwargs)
        if not raw:
            raise RedisConnectionError("Connection closed by server.")
        byte, response = raw[:1], raw[1:]
        if byte == b"-":
            text = response.decode("utf-8", errors="replace")
            error = self.parse_error(text)
            if isinstance(error, RedisConnectionError):
                raise type(error)(text)
            return ResponseError(text)
        if byte == b"+":
            return response.decode("utf-8", errors="replace")
        if byte == b":":
            return int(response)
        if byte in (b"$", b"*") and response == b"-1":
            return None
        if byte == b"$":
            return self._buffer.read(int(response), **kwargs)
        if byte == b"*":
            return [
                self._read_response(disable_decoding=disable_decoding, **kwargs)
                for _ in range(int(response))
            ]
        raise InvalidResponse(f"Protocol Error: {raw!r}")


class RedisTransport:
    """Owns one connection pool to a single server."""

    def __init__(
        self,
        *,
        host: str = "127.0.0.1",
        port: Any = 6379,
        unix_socket: str = "",
        password: Optional[str] = None,
        db: int = 0,
        tls: bool = False,
        pool_size: int = DEFAULT_POOL_SIZE,
        dial_timeout: float = DEFAULT_TIMEOUT,
        read_timeout: float = DEFAULT_TIMEOUT,
        write_timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        kwargs = {
            "password": password or None,
            "db": db,
            "max_connections": pool_size,
            "socket_connect_timeout": dial_timeout,
            # redis-py uses one socket timeout for reads and writes
            "socket_timeout": max(read_timeout, write_timeout),
            "parser_class": StatusReplyParser,
            # the status-preserving parser speaks RESP2 only
            "protocol": 2,
        }
        if unix_socket:
            connection_class = redis.UnixDomainSocketConnection
            kwargs["path"] = unix_socket
            self.address = unix_socket
        else:
            try:
                port_number = int(port)
            except (TypeError, ValueError) as exc:
                raise TransportError(f"invalid port: {port!r}") from exc
            connection_class = redis.SSLConnection if tls else redis.Connection
            kwargs["host"] = host
            kwargs["port"] = port_number
            self.address = f"{host}:{port}"
        self._pool = redis.ConnectionPool(connection_class=connection_class, **kwargs)
        self._client = redis.Redis(connection_pool=self._pool)
        # replies are rendered as the server sent them
        self._client.response_callbacks.clear()
        LOGGER.debug("transport created for %s (db=%s, tls=%s)", self.address, db, tls)

    def execute(self, *args: Any) -> Reply:
        """Send one command; server errors come back as ``ErrorValue``."""
        try:
            response = self._client.execute_command(*args)
        except ResponseError as exc:
            return ErrorValue(str(exc))
        except RedisError as exc:
            raise TransportError(str(exc)) from exc
        except OSError as exc:
            raise TransportError(str(exc)) from exc
        return from_redis(response)

    def ping(self) -> None:
        """Round-trip PING; AUTH, when a password is set, runs as the connection opens."""
        reply = self.execute("PING")
        if isinstance(reply, ErrorValue):
            raise TransportError(reply.message)

    def remember_db(self, index: int) -> None:
        """Make connections opened later on select *index*."""
        self._pool.connection_kwargs["db"] = index

    def close(self) -> None:
        try:
            self._client.close()
            self._pool.disconnect()
        except Exception as exc:  # pragma: no cover - best effort
            LOGGER.debug("transport close failed: %s", exc)


__all__ = ["RedisTransport", "StatusReplyParser", "TransportError"]
