"""Key path utilities for dot-joined query keys."""

from __future__ import annotations


class KeyMapper:
    """Join key path segments met while descending into nested values."""

    def __init__(self, sep: str = ".") -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def join(self, *parts: str) -> str:
        """Join segments with the separator, keeping empty segments."""
        if not parts:
            msg = "at least one key part is required"
            raise ValueError(msg)
        return self.sep.join(parts)

    def child(self, path: str | None, part: str) -> str:
        """Return the path of a child segment; the root path is None."""
        if path is None:
            return part
        return self.join(path, part)
