"""Immutable, versioned lookup tables for the Chapter 7 means test.

A StandardsTables instance bundles one effective-date set of IRS Collection
Financial Standards and U.S. Trustee median income figures. Upgrading to a
new year's figures means registering a new instance, never mutating one.

Every lookup degrades to a documented fallback rather than failing:
- unknown state median income -> national-average estimate
- unknown state region -> South
- county without an explicit housing bracket -> state bracket
- unknown state housing -> national default bracket
"""

from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Optional

from ..exceptions import ValidationError
from ..models.household import USRegion, normalize_county, normalize_state


class NationalStandardBreakdown(NamedTuple):
    """National Standards for food, clothing and other items, by category."""
    food: Decimal
    housekeeping: Decimal
    apparel: Decimal
    personal_care: Decimal
    miscellaneous: Decimal

    @property
    def total(self) -> Decimal:
        """Sum of all categories."""
        return (
            self.food + self.housekeeping + self.apparel
            + self.personal_care + self.miscellaneous
        )

    def plus(self, other: "NationalStandardBreakdown", times: int = 1) -> "NationalStandardBreakdown":
        """Add another breakdown category by category, `times` times."""
        return NationalStandardBreakdown(
            *(mine + theirs * times for mine, theirs in zip(self, other))
        )


class MetroArea(NamedTuple):
    """Metropolitan area with its own vehicle operating standard."""
    name: str
    one_car: Decimal
    two_cars: Decimal
    region: USRegion


def check_household_size(household_size: int) -> int:
    """Reject non-positive household sizes."""
    if household_size < 1:
        raise ValidationError(
            "Household size must be at least 1",
            field="household_size",
            value=household_size,
            constraint=">= 1",
        )
    return household_size


def _freeze(value: Any) -> Any:
    """Recursively wrap dicts in read-only proxies and lists in tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


@dataclass(frozen=True)
class StandardsTables:
    """One effective-date set of means test reference tables."""

    version: str
    effective_date: date
    median_income_effective_date: date

    # National Standards: household size 1-4, plus per-person increment over 4
    national_standards: Mapping[int, NationalStandardBreakdown]
    national_additional_person: NationalStandardBreakdown

    # Out-of-pocket health care, per person
    health_care_under_65: Decimal
    health_care_65_and_over: Decimal

    # state -> (size1, size2, size3, size4, per additional person)
    median_income_table: Mapping[str, tuple]
    median_fallback_base: Decimal
    median_fallback_per_person: Decimal

    # Transportation
    vehicle_ownership: Mapping[int, Decimal]
    public_transportation: Decimal
    regional_operating: Mapping[USRegion, Mapping[int, Decimal]]
    metro_areas: Mapping[str, MetroArea]
    county_to_metro: Mapping[str, Mapping[str, str]]
    state_to_region: Mapping[str, USRegion]
    default_region: USRegion

    # Housing and utilities: bucket 5 means "5 or more"
    state_housing: Mapping[str, Mapping[int, Decimal]]
    county_housing: Mapping[str, Mapping[str, Mapping[int, Decimal]]]
    national_housing_default: Mapping[int, Decimal]

    # Presumption of abuse thresholds (Form B 122A-2, Line 40)
    lower_threshold_60: Decimal
    upper_threshold_60: Decimal
    next_adjustment_date: date

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _freeze(getattr(self, f.name)))

    # -------------------------------------------------------------------------
    # National Standards
    # -------------------------------------------------------------------------

    def national_standard_breakdown(self, household_size: int) -> NationalStandardBreakdown:
        """National Standards by category for a household size."""
        check_household_size(household_size)
        if household_size <= 4:
            return self.national_standards[household_size]
        return self.national_standards[4].plus(
            self.national_additional_person, times=household_size - 4
        )

    def national_standard_total(self, household_size: int) -> Decimal:
        """Monthly National Standards total.

        Sizes 1-4 come straight from the table; larger households add the
        per-person increment for each member over four.
        """
        return self.national_standard_breakdown(household_size).total

    def health_care_rate(self, age: int) -> Decimal:
        """Per-person out-of-pocket health care standard for an age."""
        return self.health_care_65_and_over if age >= 65 else self.health_care_under_65

    # -------------------------------------------------------------------------
    # Median income
    # -------------------------------------------------------------------------

    def state_median_income(self, state: str, household_size: int) -> Decimal:
        """Annual state median family income for a household size.

        Households over four add the state's per-person increment. Unknown
        states get a national-average estimate.
        """
        check_household_size(household_size)
        row = self.median_income_table.get(normalize_state(state))
        if row is None:
            return self.median_fallback_base + self.median_fallback_per_person * (household_size - 1)
        if household_size <= 4:
            return row[household_size - 1]
        return row[3] + row[4] * (household_size - 4)

    def has_median_income(self, state: str) -> bool:
        """Whether the state has published median income figures."""
        return normalize_state(state) in self.median_income_table

    # -------------------------------------------------------------------------
    # Transportation
    # -------------------------------------------------------------------------

    def region_for_state(self, state: str) -> USRegion:
        """IRS transportation region for a state (South when unmapped)."""
        return self.state_to_region.get(normalize_state(state), self.default_region)

    def ownership_rate(self, vehicle_count: int) -> Decimal:
        """National vehicle ownership standard for 0-2 vehicles."""
        vehicles = min(max(vehicle_count, 0), 2)
        if vehicles == 0:
            return Decimal("0")
        return self.vehicle_ownership[vehicles]

    def regional_operating_rate(self, region: USRegion, vehicle_count: int) -> Decimal:
        """Regional baseline operating standard for 0-2 vehicles."""
        vehicles = min(max(vehicle_count, 0), 2)
        if vehicles == 0:
            return Decimal("0")
        return self.regional_operating[region][vehicles]

    def metro_area_for(self, state: str, county: Optional[str]) -> Optional[MetroArea]:
        """Metro area a county belongs to, if any."""
        normalized_county = normalize_county(county)
        if not normalized_county:
            return None
        counties = self.county_to_metro.get(normalize_state(state))
        if not counties:
            return None
        metro_key = counties.get(normalized_county)
        if metro_key is None:
            return None
        return self.metro_areas.get(metro_key)

    # -------------------------------------------------------------------------
    # Housing and utilities
    # -------------------------------------------------------------------------

    def county_housing_bracket(
        self, state: str, county: Optional[str]
    ) -> Optional[Mapping[int, Decimal]]:
        """Explicit county bracket, or None when the county has no data."""
        normalized_county = normalize_county(county)
        if not normalized_county:
            return None
        counties = self.county_housing.get(normalize_state(state))
        if not counties:
            return None
        return counties.get(normalized_county)

    def state_housing_bracket(self, state: str) -> Mapping[int, Decimal]:
        """State default bracket, or the national default for unmapped states."""
        return self.state_housing.get(normalize_state(state), self.national_housing_default)

    def counties_with_housing_data(self, state: str) -> list[str]:
        """Counties of a state that have explicit housing brackets."""
        return sorted(self.county_housing.get(normalize_state(state), {}))

    # -------------------------------------------------------------------------
    # Presumption thresholds
    # -------------------------------------------------------------------------

    @property
    def lower_threshold_monthly(self) -> Decimal:
        """Lower presumption threshold expressed per month."""
        return self.lower_threshold_60 / 60

    @property
    def upper_threshold_monthly(self) -> Decimal:
        """Upper presumption threshold expressed per month."""
        return self.upper_threshold_60 / 60
