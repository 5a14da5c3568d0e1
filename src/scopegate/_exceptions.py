from __future__ import annotations

__all__ = [
    "ScopeGateError",
    "ConfigurationError",
    "ContainerUnavailableError",
]


class ScopeGateError(Exception):
    pass


class ConfigurationError(ScopeGateError):
    pass


class ContainerUnavailableError(ScopeGateError):
    """Raised by a UI host adapter when asked for a container that isn't the active one.

    Adapters should prefer returning ``None``; this exists for hosts that can only
    signal an inactive container by failing.
    """

    def __init__(self, container: object, message: str | None = None) -> None:
        super().__init__(message or f"Container {container} is not active")
        self.container = container
