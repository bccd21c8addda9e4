"""Content domain models: the document tree loaded from content.json."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel, to_snake


class Platform(str, Enum):
    """Top-level content partitions."""

    WEB = "web"
    NATIVE = "native"


class NativePlatform(str, Enum):
    """Native sub-platforms with their own developer notes."""

    IOS = "ios"
    ANDROID = "android"


class Component(BaseModel):
    """A single accessibility-criteria record (e.g. button, checkbox)."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str = Field(min_length=1)
    label: str
    general_notes: str | None = None
    gherkin: str | None = None
    condensed: str | None = None
    developer_notes: str | None = None
    android_developer_notes: str | None = None
    ios_developer_notes: str | None = None
    videos: Any = None

    @field_validator("label", mode="before")
    @classmethod
    def default_label(cls, v: Any) -> Any:
        """Treat a missing label as an empty display string."""
        return "" if v is None else v

    def section(self, field: str) -> str | None:
        """Return an optional text section by its content.json name.

        Non-string values are treated as absent.
        """
        value = getattr(self, to_snake(field), None)
        return value if isinstance(value, str) else None

    def has_section(self, field: str) -> bool:
        """True when the section exists and is not empty."""
        if field == "videos":
            return bool(self.videos)
        return bool(self.section(field))


class Category(BaseModel):
    """A named grouping of components within a platform."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)
    label: str
    children: tuple[Component, ...] = ()

    @field_validator("children", mode="before")
    @classmethod
    def default_children(cls, v: Any) -> Any:
        """A category without children is an empty category."""
        return () if v is None else v


class DocumentCollection(BaseModel):
    """Root of the content tree, one ordered category list per platform."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    web: tuple[Category, ...] = ()
    native: tuple[Category, ...] = ()

    @field_validator("web", "native", mode="before")
    @classmethod
    def default_platform(cls, v: Any) -> Any:
        """A null platform is an empty platform."""
        return () if v is None else v

    def categories(self, platform: str) -> tuple[Category, ...]:
        """Categories for a platform key; unknown platforms are empty."""
        try:
            key = Platform(platform)
        except ValueError:
            return ()
        return self.web if key is Platform.WEB else self.native

    def component_count(self, platform: str) -> int:
        """Total number of components across a platform's categories."""
        return sum(len(category.children) for category in self.categories(platform))


__all__ = [
    "Platform",
    "NativePlatform",
    "Component",
    "Category",
    "DocumentCollection",
]
