class MarvelApiError(RuntimeError):
    pass


class ConfigError(MarvelApiError):
    """Bad credentials, base URL or endpoint; raised before anything is sent."""


class TransportError(MarvelApiError):
    """
    The GET never produced a response (DNS, connection refused, timeout, TLS).
    Handed to the caller's callback, never raised by the client.
    """


class UpstreamError(MarvelApiError):
    def __init__(self, status: int, body: bytes | None = None):
        self.status = status
        self.body = body
        snippet = (body or b"")[:200].decode("utf-8", errors="replace")
        super().__init__(f"Marvel API returned HTTP {status}: {snippet}")
