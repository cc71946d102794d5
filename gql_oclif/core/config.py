"""Generator configuration.

Keys are accepted in both snake_case and the camelCase used by graphql-codegen
configs, e.g. ``{"clientPath": "../client"}``.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .ir import FlagKind


class OclifConfig(BaseModel):
    """Options that shape the generated command files."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    client_path: str = Field(default="../../client", alias="clientPath")
    enums_as_strings: bool = Field(default=False, alias="enumsAsStrings")
    scalars: dict[str, FlagKind] = Field(default_factory=dict)
    header: str | None = None
    template_dir: str | None = Field(default=None, alias="templateDir")

    @classmethod
    def from_file(cls, path: str | Path) -> "OclifConfig":
        """Load a config from a JSON file."""
        return cls.model_validate_json(Path(path).read_text())
