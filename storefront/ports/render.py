from typing import Protocol


class RenderContextPort(Protocol):
    """The active rendering context that receives derived theme tokens."""

    def apply_tokens(self, tokens: dict[str, str]) -> None:
        ...
