"""Fatal error for an integrity check over no documents."""


class EmptyCorpusError(ValueError):
    """Raised when the integrity checker is given zero documents."""
