class ProxyError(Exception):
    """Base class for errors raised by the fetch pipeline."""

class ValidationError(ProxyError):
    """Batch input is missing or malformed; raised before any request is made."""

class TransportError(ProxyError):
    """No HTTP response was obtained (DNS, connection, timeout, bad URL)."""

class RemoteHttpError(ProxyError):
    """The remote server answered with a non-ok status."""

    def __init__(self, status: int, status_text: str):
        self.status = status
        self.status_text = status_text
        super().__init__(f"HTTP {status}: {status_text}")
