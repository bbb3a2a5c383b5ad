from typing import Any, Protocol


class LocalStoragePort(Protocol):
    """Small key/value store for client-side state that survives restarts."""

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def remove(self, key: str) -> None:
        ...
