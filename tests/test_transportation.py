"""Tests for the transportation allowance calculator."""

from decimal import Decimal

import pytest

from chapter7_core import HouseholdProfile, USRegion, calculate_irs_allowances
from chapter7_core.transportation import (
    TransportationCalculator,
    calculate_transportation_allowance,
)


@pytest.fixture
def calculator() -> TransportationCalculator:
    return TransportationCalculator()


class TestNoVehicle:
    """Tests for households without a vehicle."""

    def test_no_vehicle_no_transit(self, calculator):
        """No vehicle and no public transit means no allowance."""
        result = calculator.calculate("CA", "Mono", 0, False)

        assert result.total == Decimal("0.00")
        assert result.ownership == Decimal("0.00")
        assert result.operating == Decimal("0.00")
        assert result.public_transit == Decimal("0.00")

    def test_no_vehicle_with_transit(self, calculator):
        """Public transit gets the national rate."""
        result = calculator.calculate("CA", "Los Angeles", 0, True)

        assert result.public_transit == Decimal("244.00")
        assert result.total == Decimal("244.00")
        assert result.ownership == Decimal("0.00")
        assert result.operating == Decimal("0.00")

    def test_no_vehicle_in_metro_county_uses_no_metro_data(self, calculator):
        """Without a vehicle, a metro county does not flag metro data."""
        result = calculator.calculate("CA", "Los Angeles", 0, True)

        assert result.metro_area is None
        assert result.using_metro_data is False
        assert result.region == USRegion.WEST

    def test_no_vehicle_allowances_flag(self):
        """The aggregated allowances do not report metro data without a vehicle."""
        profile = HouseholdProfile(
            state="CA",
            county="Los Angeles",
            household_size=1,
            vehicle_count=0,
            uses_public_transportation=True,
        )
        allowances = calculate_irs_allowances(profile)

        assert allowances.using_metro_data is False
        assert allowances.transportation.metro_area is None


class TestWithVehicles:
    """Tests for households with one or two vehicles."""

    def test_metro_county_uses_metro_rate(self, calculator):
        """A metro county uses the metro operating rate."""
        result = calculator.calculate("CA", "Los Angeles", 1)

        assert result.ownership == Decimal("662.00")
        assert result.operating == Decimal("353.00")
        assert result.total == Decimal("1015.00")
        assert result.metro_area == "Los Angeles"
        assert result.using_metro_data is True
        assert result.region == USRegion.WEST

    def test_non_metro_county_uses_regional_baseline(self, calculator):
        """Counties outside any metro area use the regional baseline."""
        result = calculator.calculate("CA", "Mono", 1)

        assert result.operating == Decimal("297.00")
        assert result.total == Decimal("959.00")
        assert result.metro_area is None
        assert result.using_metro_data is False

    def test_two_vehicles_in_metro(self, calculator):
        """Two vehicles use the two-car rates."""
        result = calculator.calculate("NY", "Kings County", 2)

        assert result.ownership == Decimal("1324.00")
        assert result.operating == Decimal("802.00")
        assert result.total == Decimal("2126.00")

    def test_vehicle_count_clamped(self, calculator):
        """More than two vehicles counts as two."""
        assert calculator.calculate("TX", "Harris", 5) == calculator.calculate("TX", "Harris", 2)

    def test_public_transit_ignored_with_vehicle(self, calculator):
        """The transit flag only matters without a vehicle."""
        result = calculator.calculate("CA", "Mono", 1, True)

        assert result.public_transit == Decimal("0.00")
        assert result.total == Decimal("959.00")

    def test_unmapped_state_uses_south(self, calculator):
        """Unmapped states use the South baseline."""
        result = calculator.calculate("PR", None, 1)

        assert result.region == USRegion.SOUTH
        assert result.operating == Decimal("281.00")

    def test_metro_region_reported(self, calculator):
        """The reported region is the metro area's region."""
        result = calculator.calculate("MD", "Montgomery", 1)

        assert result.metro_area == "Washington, D.C."
        assert result.region == USRegion.SOUTH
        assert result.operating == Decimal("295.00")


class TestHelpers:
    """Tests for metro and cost helpers."""

    def test_is_in_metro_area(self, calculator):
        """Metro membership ignores case and suffix."""
        assert calculator.is_in_metro_area("il", "cook county") is True
        assert calculator.is_in_metro_area("IL", "Sangamon") is False

    def test_metro_area_for_county(self, calculator):
        """Metro lookup returns the metro record."""
        metro = calculator.metro_area_for_county("TX", "Harris")

        assert metro.name == "Houston"
        assert metro.two_cars == Decimal("718")

    def test_same_county_name_in_other_state(self, calculator):
        """County names are scoped to their state."""
        assert calculator.metro_area_for_county("NY", "Suffolk").name == "New York"
        assert calculator.metro_area_for_county("MA", "Suffolk").name == "Boston"

    def test_ownership_costs(self, calculator):
        """Ownership is national and clamped to two vehicles."""
        assert calculator.ownership_costs(0) == Decimal("0.00")
        assert calculator.ownership_costs(1) == Decimal("662.00")
        assert calculator.ownership_costs(3) == Decimal("1324.00")

    def test_operating_costs_metadata(self, calculator):
        """Operating costs carry their geography."""
        costs = calculator.operating_costs("CO", "Denver", 2)

        assert costs.cost == Decimal("674.00")
        assert costs.region == USRegion.WEST
        assert costs.metro_area == "Denver"
        assert costs.using_metro_data is True

    def test_module_function(self):
        """Convenience function uses the current standards."""
        result = calculate_transportation_allowance("FL", "Miami-Dade", 1)
        assert result.operating == Decimal("400.00")
