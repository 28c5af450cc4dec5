"""Dangling link finding."""

from pydantic import BaseModel, ConfigDict


class DanglingLink(BaseModel):
    """A link whose resolved target is neither a loaded document nor a file under the root."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str
    raw_target: str
    target: str
    line_number: int
    column_number: int
    is_embed: bool = False
