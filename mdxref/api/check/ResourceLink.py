"""Non-document target finding."""

from pydantic import BaseModel, ConfigDict


class ResourceLink(BaseModel):
    """A link to a file under the root that exists but is not a loaded document (an image, a PDF)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str
    raw_target: str
    target: str
    line_number: int
    is_embed: bool = False
