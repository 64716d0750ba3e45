"""Chapter 7 Core - Means test and IRS allowance calculations."""

__version__ = "0.1.0"

from .allowances import (
    IRSAllowanceAggregator,
    calculate_irs_allowances,
    get_health_care_standard,
    get_national_standard_total,
    get_state_median_income,
)
from .cmi import CMICalculator, calculate_cmi, monthly_amount
from .config import EngineConfig, StageBPolicy
from .exceptions import Chapter7Error, ConfigurationError, ValidationError
from .housing import CountyHousingResolver, counties_for_state, has_county_data
from .means_test import MeansTestEngine, calculate_means_test
from .models import (
    CMICalculation,
    HouseholdProfile,
    IncomeSource,
    IRSAllowances,
    MeansTestResult,
    MonthlyIncomeEntry,
    PayPeriod,
    TransportationAllowance,
    USRegion,
)
from .standards import StandardsTables, available_versions, get_standards
from .transportation import TransportationCalculator, calculate_transportation_allowance

__all__ = [
    "MeansTestEngine",
    "calculate_means_test",
    "IRSAllowanceAggregator",
    "calculate_irs_allowances",
    "get_health_care_standard",
    "get_national_standard_total",
    "get_state_median_income",
    "CMICalculator",
    "calculate_cmi",
    "monthly_amount",
    "CountyHousingResolver",
    "counties_for_state",
    "has_county_data",
    "TransportationCalculator",
    "calculate_transportation_allowance",
    "StandardsTables",
    "available_versions",
    "get_standards",
    "EngineConfig",
    "StageBPolicy",
    "Chapter7Error",
    "ConfigurationError",
    "ValidationError",
    "CMICalculation",
    "HouseholdProfile",
    "IncomeSource",
    "IRSAllowances",
    "MeansTestResult",
    "MonthlyIncomeEntry",
    "PayPeriod",
    "TransportationAllowance",
    "USRegion",
]
