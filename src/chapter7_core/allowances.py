"""IRS National and Local Standards aggregation for Form B 122A-2.

Combines:
- National Standards for food, clothing and other items (Line 6)
- Out-of-pocket health care (Line 7)
- Housing and utilities (Lines 8-9)
- Transportation (Lines 12-14)
"""

from decimal import Decimal
from typing import Optional

import structlog

from .exceptions import ValidationError
from .housing import CountyHousingResolver
from .models.household import HouseholdProfile
from .models.results import IRSAllowances
from .money import to_money
from .standards import StandardsTables, check_household_size, get_standards
from .transportation import TransportationCalculator

logger = structlog.get_logger()


def get_national_standard_total(
    household_size: int, standards: Optional[StandardsTables] = None
) -> Decimal:
    """National Standards total for food, clothing and other items.

    Args:
        household_size: Number of persons in the household (>= 1)
        standards: Table set to use (default: current)

    Returns:
        Monthly allowance; households over 4 add the per-person increment
    """
    standards = standards or get_standards()
    return to_money(standards.national_standard_total(household_size))


def get_state_median_income(
    state: str, household_size: int, standards: Optional[StandardsTables] = None
) -> Decimal:
    """Annual state median family income for a household size."""
    standards = standards or get_standards()
    return to_money(standards.state_median_income(state, household_size))


def get_health_care_standard(
    household_size: int,
    primary_age: int = 40,
    member_ages: Optional[list[int]] = None,
    standards: Optional[StandardsTables] = None,
) -> Decimal:
    """Out-of-pocket health care allowance for the household.

    With a roster of member ages each person is billed at their own rate.
    Without one, a primary debtor of 65 or older bills everyone at the
    65-and-over rate; otherwise floor(size / 4) members are assumed to be
    65 or older.

    Args:
        household_size: Number of persons in the household (>= 1)
        primary_age: Age of the primary debtor
        member_ages: Ages of every household member, if known
        standards: Table set to use (default: current)

    Returns:
        Monthly health care allowance
    """
    standards = standards or get_standards()
    check_household_size(household_size)

    if member_ages is not None:
        if len(member_ages) != household_size:
            raise ValidationError(
                f"member_ages lists {len(member_ages)} people but household_size is {household_size}",
                field="member_ages",
                value=str(member_ages),
                constraint="one age per household member",
            )
        return to_money(sum((standards.health_care_rate(age) for age in member_ages), Decimal("0")))

    if primary_age >= 65:
        return to_money(standards.health_care_65_and_over * household_size)

    seniors = household_size // 4
    under_65 = household_size - seniors
    return to_money(
        standards.health_care_65_and_over * seniors
        + standards.health_care_under_65 * under_65
    )


class IRSAllowanceAggregator:
    """Sum every IRS standard that applies to a household."""

    def __init__(self, standards: Optional[StandardsTables] = None):
        self.standards = standards or get_standards()
        self.housing = CountyHousingResolver(self.standards)
        self.transportation = TransportationCalculator(self.standards)

    def calculate(self, profile: HouseholdProfile) -> IRSAllowances:
        """Compute the allowance breakdown for a household profile."""
        national = get_national_standard_total(profile.household_size, self.standards)
        housing = self.housing.resolve(
            profile.state, profile.county, profile.household_size
        )
        transportation = self.transportation.calculate(
            profile.state,
            profile.county,
            profile.allowance_vehicle_count,
            profile.uses_public_transportation,
        )
        health_care = get_health_care_standard(
            profile.household_size,
            profile.primary_age,
            profile.member_ages,
            self.standards,
        )
        total = to_money(national + housing.amount + transportation.total + health_care)

        logger.debug(
            "irs_allowances_calculated",
            state=profile.state,
            county=profile.normalized_county,
            household_size=profile.household_size,
            total=str(total),
            housing_source=housing.source,
            using_metro_data=transportation.using_metro_data,
        )

        return IRSAllowances(
            national_standards=national,
            housing_utilities=housing.amount,
            transportation=transportation,
            health_care=health_care,
            total=total,
            using_county_data=housing.using_county_data,
            using_metro_data=transportation.using_metro_data,
            county=profile.normalized_county,
        )


def calculate_irs_allowances(
    profile: HouseholdProfile, standards: Optional[StandardsTables] = None
) -> IRSAllowances:
    """IRS allowances for a household using the current (or given) standards."""
    return IRSAllowanceAggregator(standards).calculate(profile)
