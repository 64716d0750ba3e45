"""County-level housing and utilities allowances (Form B 122A-2, Lines 8-9).

Resolution order for a (state, county, household size):
1. Explicit county bracket
2. State default bracket
3. National default bracket (unmapped state)

Household sizes above the largest bucket reuse that bucket.
"""

from decimal import Decimal
from typing import NamedTuple, Optional

import structlog

from .money import to_money
from .models.household import normalize_county, normalize_state
from .standards import StandardsTables, check_household_size, get_standards

logger = structlog.get_logger()

MAX_HOUSING_BUCKET = 5


class HousingResolution(NamedTuple):
    """Resolved housing allowance and where it came from."""
    amount: Decimal
    using_county_data: bool
    source: str  # "county", "state" or "national"


class CountyHousingResolver:
    """Resolve housing allowances with county -> state -> national fallback."""

    def __init__(self, standards: Optional[StandardsTables] = None):
        self.standards = standards or get_standards()

    def resolve(
        self,
        state: str,
        county: Optional[str],
        household_size: int,
    ) -> HousingResolution:
        """Resolve the monthly housing allowance with its data source.

        Args:
            state: Two-letter state code (any case)
            county: County name, with or without a "County" suffix
            household_size: Number of persons in the household (>= 1)

        Returns:
            HousingResolution with the cents-quantized amount

        Raises:
            ValidationError: If household_size < 1
        """
        check_household_size(household_size)
        bucket = min(household_size, MAX_HOUSING_BUCKET)
        state_code = normalize_state(state)
        county_name = normalize_county(county)

        bracket = self.standards.county_housing_bracket(state_code, county_name)
        if bracket is not None:
            return HousingResolution(to_money(bracket[bucket]), True, "county")

        if state_code in self.standards.state_housing:
            if county_name:
                logger.debug(
                    "housing_county_fallback",
                    state=state_code,
                    county=county_name,
                )
            return HousingResolution(
                to_money(self.standards.state_housing_bracket(state_code)[bucket]),
                False,
                "state",
            )

        logger.info("housing_state_unmapped", state=state_code, county=county_name)
        return HousingResolution(
            to_money(self.standards.national_housing_default[bucket]), False, "national"
        )

    def allowance(self, state: str, county: Optional[str], household_size: int) -> Decimal:
        """Monthly housing and utilities allowance."""
        return self.resolve(state, county, household_size).amount

    def has_county_data(self, state: str, county: Optional[str] = None) -> bool:
        """Whether explicit county data exists.

        With a county, checks that (state, county) has its own bracket.
        Without one, checks whether the state has any county brackets.
        """
        if normalize_county(county):
            return self.standards.county_housing_bracket(state, county) is not None
        return bool(self.standards.counties_with_housing_data(state))

    def counties_for_state(self, state: str) -> list[str]:
        """Sorted counties of a state with explicit housing brackets."""
        return self.standards.counties_with_housing_data(state)


def get_county_housing_allowance(
    state: str,
    county: Optional[str],
    household_size: int,
    standards: Optional[StandardsTables] = None,
) -> Decimal:
    """Monthly housing allowance using the current (or given) standards."""
    return CountyHousingResolver(standards).allowance(state, county, household_size)


def has_county_data(
    state: str,
    county: Optional[str] = None,
    standards: Optional[StandardsTables] = None,
) -> bool:
    """Whether explicit county housing data exists for display purposes."""
    return CountyHousingResolver(standards).has_county_data(state, county)


def counties_for_state(state: str, standards: Optional[StandardsTables] = None) -> list[str]:
    """Counties of a state with explicit housing brackets."""
    return CountyHousingResolver(standards).counties_for_state(state)
