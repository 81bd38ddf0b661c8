"""Entry model - one filesystem object found during traversal"""

from pathlib import Path

from pydantic import BaseModel, Field


class Entry(BaseModel):
    """File or directory discovered by the walker"""

    path: Path = Field(
        ...,
        description="Absolute path of the entry"
    )

    is_dir: bool = Field(
        ...,
        description="Whether the entry is a directory (symlinks are not followed)"
    )

    class Config:
        extra = "forbid"
        frozen = True

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def parent(self) -> Path:
        return self.path.parent
