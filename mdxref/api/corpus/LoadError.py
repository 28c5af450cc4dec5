"""Fatal corpus load error."""

from pathlib import Path


class LoadError(Exception):
    """Raised when the corpus root cannot be scanned at all."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")
