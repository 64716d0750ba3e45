"""Transportation allowances (Form B 122A-2, Lines 12-14).

The form splits transportation into three lines:
1. Vehicle ownership (lease or loan) - national, max 2 vehicles
2. Vehicle operating (fuel, maintenance, insurance) - metro area or region
3. Public transportation - national, only when there is no vehicle

Only the operating line varies by location. A county inside a named metro
area uses the metro figure; everything else uses the regional baseline.
"""

from decimal import Decimal
from typing import NamedTuple, Optional

import structlog

from .models.household import USRegion, normalize_county, normalize_state
from .models.results import TransportationAllowance
from .money import ZERO, to_money
from .standards import MetroArea, StandardsTables, get_standards

logger = structlog.get_logger()


def _clamp_vehicles(vehicle_count: int) -> int:
    return min(max(vehicle_count, 0), 2)


class OperatingCosts(NamedTuple):
    """Vehicle operating standard and the geography it came from."""
    cost: Decimal
    region: USRegion
    metro_area: Optional[str]
    using_metro_data: bool


class TransportationCalculator:
    """Resolve the ownership/operating/public-transit breakdown for a household."""

    def __init__(self, standards: Optional[StandardsTables] = None):
        self.standards = standards or get_standards()

    def metro_area_for_county(self, state: str, county: Optional[str]) -> Optional[MetroArea]:
        """Metro area a county belongs to, or None."""
        return self.standards.metro_area_for(state, county)

    def is_in_metro_area(self, state: str, county: Optional[str]) -> bool:
        """Whether the county falls inside a named metro area."""
        return self.metro_area_for_county(state, county) is not None

    def ownership_costs(self, vehicle_count: int) -> Decimal:
        """National vehicle ownership allowance for 0-2 vehicles."""
        return to_money(self.standards.ownership_rate(_clamp_vehicles(vehicle_count)))

    def operating_costs(
        self,
        state: str,
        county: Optional[str],
        vehicle_count: int,
    ) -> OperatingCosts:
        """Vehicle operating allowance from the metro area or regional baseline.

        Args:
            state: Two-letter state code
            county: County name (optional)
            vehicle_count: Vehicles owned, clamped to 0-2

        Returns:
            OperatingCosts; the region is the metro area's region when one applies
        """
        vehicles = _clamp_vehicles(vehicle_count)
        metro = self.metro_area_for_county(state, county)

        if metro is not None:
            if vehicles == 0:
                cost = ZERO
            else:
                cost = metro.one_car if vehicles == 1 else metro.two_cars
            return OperatingCosts(to_money(cost), metro.region, metro.name, True)

        region = self.standards.region_for_state(state)
        if normalize_state(state) not in self.standards.state_to_region:
            logger.info(
                "transportation_region_unmapped",
                state=normalize_state(state),
                default_region=region.value,
            )
        elif normalize_county(county):
            logger.debug(
                "transportation_regional_baseline",
                state=normalize_state(state),
                county=normalize_county(county),
                region=region.value,
            )
        return OperatingCosts(
            to_money(self.standards.regional_operating_rate(region, vehicles)),
            region,
            None,
            False,
        )

    def calculate(
        self,
        state: str,
        county: Optional[str] = None,
        vehicle_count: int = 1,
        uses_public_transportation: bool = False,
    ) -> TransportationAllowance:
        """Full transportation allowance.

        Args:
            state: Two-letter state code
            county: County name (optional)
            vehicle_count: Vehicles owned; values above 2 count as 2
            uses_public_transportation: Only honored when vehicle_count is 0

        Returns:
            TransportationAllowance with ownership, operating, public transit and total
        """
        vehicles = _clamp_vehicles(vehicle_count)

        # No vehicle: public transit line only
        if vehicles == 0:
            public_transit = (
                to_money(self.standards.public_transportation)
                if uses_public_transportation
                else to_money(ZERO)
            )
            return TransportationAllowance(
                ownership=to_money(ZERO),
                operating=to_money(ZERO),
                public_transit=public_transit,
                total=public_transit,
                region=self.standards.region_for_state(state),
                metro_area=None,
                using_metro_data=False,
            )

        operating = self.operating_costs(state, county, vehicles)
        ownership = self.ownership_costs(vehicles)
        return TransportationAllowance(
            ownership=ownership,
            operating=operating.cost,
            public_transit=to_money(ZERO),
            total=to_money(ownership + operating.cost),
            region=operating.region,
            metro_area=operating.metro_area,
            using_metro_data=operating.using_metro_data,
        )


def calculate_transportation_allowance(
    state: str,
    county: Optional[str] = None,
    vehicle_count: int = 1,
    uses_public_transportation: bool = False,
    standards: Optional[StandardsTables] = None,
) -> TransportationAllowance:
    """Transportation allowance using the current (or given) standards."""
    return TransportationCalculator(standards).calculate(
        state, county, vehicle_count, uses_public_transportation
    )
