"""Parsed VectorDrawable model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VectorPath(BaseModel):
    """A single <path> with the attributes that survive translation."""

    model_config = ConfigDict(frozen=True)

    path_data: str = Field(min_length=1)
    fill_color: str | None = None  # literal hex only, e.g. "#FF0000"
    stroke_color: str | None = None
    stroke_width: str | None = None  # carried verbatim


class Group(BaseModel):
    model_config = ConfigDict(frozen=True)

    paths: tuple[VectorPath, ...] = Field(min_length=1)


class Drawable(BaseModel):
    """Represents a parsed <vector> resource.

    Groups and bare paths are kept in separate tuples, each in document order.
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)
    paths: tuple[VectorPath, ...] = ()
    groups: tuple[Group, ...] = ()

    @property
    def path_count(self) -> int:
        return len(self.paths) + sum(len(g.paths) for g in self.groups)
