"""Self-reference finding."""

from pydantic import BaseModel, ConfigDict


class SelfReference(BaseModel):
    """A link from a document to itself (warning, not an error)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str
    raw_target: str
    line_number: int
    fragment: str = ""
