"""RenameSettings model - resolved options for one run"""

from pathlib import Path

from pydantic import BaseModel, Field


class RenameSettings(BaseModel):
    """Options passed from the CLI (and config) into the rename driver"""

    root: Path = Field(
        ...,
        description="Directory to walk"
    )

    dry_run: bool = Field(
        False,
        description="Print planned renames instead of performing them"
    )

    maintain_case: bool = Field(
        True,
        description="Keep the original letter case when slugifying"
    )

    separator: str = Field(
        "-",
        min_length=1,
        pattern=r"^[^./_]+$",
        description="Word separator used by the slug transform"
    )

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "examples": [
                {
                    "root": "/home/user/downloads",
                    "dry_run": True,
                    "maintain_case": True,
                    "separator": "-"
                }
            ]
        }
