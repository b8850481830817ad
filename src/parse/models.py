"""Data models for scraped records."""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# Age of a cat whose age could not be read from its name or description
UNKNOWN_AGE = -1


class Cat(BaseModel):
    """One cat listed on the adoption page."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Text of .cat-name")
    description: str = Field(default="", description="Text of .cat-text")
    tags: tuple[str, ...] = Field(default_factory=tuple, description="Texts of .cat-tag in document order")
    is_sold: bool = Field(default=False, description="A .sold marker is present")
    link: Optional[str] = Field(default=None, description="href of the a.btn button")


class AgedCat(Cat):
    """Cat with an inferred age."""

    age_in_months: float = Field(default=UNKNOWN_AGE, description="-1 when unknown")


class FilterOptions(BaseModel):
    """Filters applied to the scraped cats.

    Accepts the camelCase option names used by trigger configurations
    (`minAgeInMonths`, `maxAgeInMonths`, `onlyAvailable`, `strictMaxAge`)
    as well as the field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tags: list[str] = Field(default_factory=list, description="Every tag must be present on a cat")
    min_age_in_months: Optional[float] = Field(default=None, alias="minAgeInMonths")
    max_age_in_months: Optional[float] = Field(default=None, alias="maxAgeInMonths")
    only_available: bool = Field(default=True, alias="onlyAvailable")
    strict_max_age: bool = Field(
        default=False,
        alias="strictMaxAge",
        description="Compare the maximum age against max_age_in_months instead of min_age_in_months",
    )
