"""⚙️ Link Configuration - Settings and Pydantic models for link definitions.

Link definitions can come from plain dictionaries or YAML text:

    links:
      - from_dataset: patients
        to_dataset: visits
        link_type: keyed
        link_columns:
          - {id: patient_id}
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

if TYPE_CHECKING:
    from .link import Link


class Settings(BaseSettings):
    """Environment-based settings (``DATALINK_*`` variables)."""

    default_link_type: str = Field(
        default="",
        description="Link type for definitions that do not set one",
    )
    arrow: str = Field(
        default="→",
        description="Separator between paired columns in console output",
    )

    class Config:
        env_prefix = "DATALINK_"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings from environment."""
    return Settings()


def _as_name(value: Any) -> Any:
    """Convert a scalar column name to str, leaving other values alone."""
    if isinstance(value, (bool, int, float)):
        return str(value)
    return value


class LinkConfig(BaseModel):
    """A single link definition."""

    from_dataset: str = Field(default="", description="Source dataset name")
    to_dataset: str = Field(default="", description="Target dataset name")
    link_type: str = Field(
        default_factory=lambda: get_settings().default_link_type,
        description="Link type tag (e.g., 'keyed')",
    )
    link_columns: list[dict[str, str]] = Field(
        default_factory=list,
        description="Column mappings: [{'from_col': 'to_col'}, ...]",
    )

    @field_validator("link_columns", mode="before")
    @classmethod
    def stringify_columns(cls, v: Any) -> Any:
        """Read scalar column names (e.g. YAML numbers) as strings."""
        if not isinstance(v, list):
            return v
        return [
            {_as_name(key): _as_name(value) for key, value in mapping.items()}
            if isinstance(mapping, dict)
            else mapping
            for mapping in v
        ]

    @classmethod
    def from_dict(cls, data: dict) -> "LinkConfig":
        """Create from a dictionary."""
        return cls(**data)

    @classmethod
    def from_link(cls, link: Link) -> "LinkConfig":
        """Create from an existing link."""
        return cls(**link.to_dict())

    def to_link(self) -> Link:
        """Build the link described by this definition."""
        from .link import Link

        return Link(
            from_dataset=self.from_dataset,
            to_dataset=self.to_dataset,
            link_type=self.link_type,
            link_columns=self.link_columns,
        )


class LinksConfig(BaseModel):
    """A collection of link definitions."""

    links: list[LinkConfig] = Field(
        default_factory=list, description="Link definitions"
    )

    @classmethod
    def from_yaml(cls, text: str) -> "LinksConfig":
        """Parse link definitions from YAML text.

        Accepts a document with a top-level ``links`` key or a bare list.
        """
        data = yaml.safe_load(text) or {}
        if isinstance(data, list):
            data = {"links": data}
        if not isinstance(data, dict):
            raise ValueError(
                f"Expected a mapping or a list of links, got {type(data).__name__}"
            )
        return cls(**data)

    def to_links(self) -> list[Link]:
        """Build every defined link."""
        return [link.to_link() for link in self.links]


def load_links(yaml_text: str) -> list[Link]:
    """Load links from YAML text.

    Args:
        yaml_text: YAML document defining the links

    Returns:
        List of Link objects, in definition order
    """
    return LinksConfig.from_yaml(yaml_text).to_links()
