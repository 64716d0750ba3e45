"""Value objects for the means test engine.

- Household facts (household.py)
- Income ledger and CMI results (income.py)
- Allowance and determination results (results.py)
"""

from .household import (
    USRegion,
    HouseholdProfile,
    normalize_state,
    normalize_county,
)
from .income import (
    IncomeSource,
    PayPeriod,
    MonthlyIncomeEntry,
    SourceSubtotal,
    MonthlyIncomeSummary,
    CMICalculation,
)
from .results import (
    AuditEntry,
    TransportationAllowance,
    IRSAllowances,
    MeansTestResult,
)

__all__ = [
    # Household
    "USRegion",
    "HouseholdProfile",
    "normalize_state",
    "normalize_county",
    # Income
    "IncomeSource",
    "PayPeriod",
    "MonthlyIncomeEntry",
    "SourceSubtotal",
    "MonthlyIncomeSummary",
    "CMICalculation",
    # Results
    "AuditEntry",
    "TransportationAllowance",
    "IRSAllowances",
    "MeansTestResult",
]
