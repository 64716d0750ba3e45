"""Household facts consumed by the allowance and means test calculators.

The intake collaborators (document extraction, chat and voice intake) are
responsible for turning free-form answers into a HouseholdProfile. This
engine only accepts the typed model defined here.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class USRegion(str, Enum):
    """IRS regions for transportation operating standards."""
    NORTHEAST = "northeast"
    MIDWEST = "midwest"
    SOUTH = "south"
    WEST = "west"


def normalize_state(state: str) -> str:
    """Upper-case and trim a two-letter state code."""
    return (state or "").strip().upper()


def normalize_county(county: Optional[str]) -> Optional[str]:
    """Normalize a county name for table lookups.

    Upper-cases, collapses whitespace and strips a trailing "County"
    suffix, so "Los Angeles County" and "los angeles" resolve alike.
    Blank input normalizes to None.
    """
    if county is None:
        return None
    normalized = " ".join(county.upper().split())
    if normalized.endswith(" COUNTY"):
        normalized = normalized[: -len(" COUNTY")].rstrip()
    return normalized or None


class HouseholdProfile(BaseModel):
    """Household facts for allowance and median-income lookups."""

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "state": "CA",
                    "county": "Los Angeles County",
                    "household_size": 3,
                    "primary_age": 41,
                    "vehicle_count": 1,
                    "uses_public_transportation": False,
                }
            ]
        },
    }

    state: str = Field(
        description="Two-letter state code (case-insensitive)",
    )
    county: Optional[str] = Field(
        default=None,
        description="County of residence, used for housing and metro-area lookups",
    )
    household_size: int = Field(
        ge=1,
        description="Number of persons counted for allowance and median purposes",
    )
    primary_age: int = Field(
        default=40,
        ge=0,
        le=130,
        description="Age of the primary debtor",
    )
    vehicle_count: int = Field(
        default=1,
        ge=0,
        description="Vehicles owned or leased; only 0-2 count toward allowances",
    )
    uses_public_transportation: bool = Field(
        default=False,
        description="Whether the debtor relies on public transit (meaningful with no vehicle)",
    )
    member_ages: Optional[list[int]] = Field(
        default=None,
        description="Ages of every household member, when known, for health care allowances",
    )

    @field_validator("state")
    @classmethod
    def validate_state(cls, v: str) -> str:
        """Normalize the state code and require two letters."""
        normalized = normalize_state(v)
        if len(normalized) != 2 or not normalized.isalpha():
            raise ValueError(f"State must be a two-letter code, got {v!r}")
        return normalized

    @field_validator("member_ages")
    @classmethod
    def validate_member_ages(cls, v: Optional[list[int]]) -> Optional[list[int]]:
        """Member ages must be non-negative."""
        if v is not None and any(age < 0 for age in v):
            raise ValueError("Member ages cannot be negative")
        return v

    @model_validator(mode="after")
    def roster_matches_household_size(self) -> "HouseholdProfile":
        """A supplied age roster must list every household member."""
        if self.member_ages is not None and len(self.member_ages) != self.household_size:
            raise ValueError(
                f"member_ages lists {len(self.member_ages)} people "
                f"but household_size is {self.household_size}"
            )
        return self

    @property
    def normalized_county(self) -> Optional[str]:
        """County name in lookup form."""
        return normalize_county(self.county)

    @property
    def allowance_vehicle_count(self) -> int:
        """Vehicle count clamped to the 0-2 range the standards recognize."""
        return min(max(self.vehicle_count, 0), 2)
