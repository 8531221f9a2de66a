class TunnelNetworkError(ValueError):
    """Base class for tunnel network failures."""


class MalformedGraphError(TunnelNetworkError):
    """No usable head or tail could be selected."""


class NoPathFoundError(TunnelNetworkError):
    """Head and tail are not connected by any route."""


class CapacityLookupError(TunnelNetworkError):
    """A path step has no matching route in the graph."""

    def __init__(self, start: str, end: str):
        super().__init__(f"no route from {start} to {end}")
        self.start = start
        self.end = end
