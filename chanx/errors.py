class TransportError(Exception):
    pass


class TransportClosed(TransportError):
    """Raised on send to (or a second close of) a closed transport."""


class TransportCancelled(TransportError):
    """Raised on send once the receiving side has lost interest."""


__all__ = (
    'TransportError', 'TransportClosed', 'TransportCancelled',
)
