"""Calculation result models for the means test engine.

Every money field is a monthly figure quantized to cents, except the
annualized income and median income used by the Stage A comparison.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from ..config import StageBPolicy
from .household import USRegion
from .income import CMICalculation


class AuditEntry(BaseModel):
    """Audit log entry for calculation transparency."""
    model_config = {"frozen": True}

    step: str
    input_value: str
    output_value: str
    source: str
    notes: Optional[str] = None
    line_number: Optional[str] = None  # Form 122A-1 / 122A-2 line reference


class TransportationAllowance(BaseModel):
    """Form B 122A-2 transportation lines: ownership, operating, public transit."""

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "ownership": "662.00",
                    "operating": "353.00",
                    "public_transit": "0.00",
                    "total": "1015.00",
                    "region": "west",
                    "metro_area": "Los Angeles",
                    "using_metro_data": True,
                }
            ]
        },
    }

    ownership: Decimal = Field(description="Vehicle ownership costs (national standard)")
    operating: Decimal = Field(description="Vehicle operating costs (regional or metro)")
    public_transit: Decimal = Field(description="Public transportation (national standard)")
    total: Decimal
    region: USRegion
    metro_area: Optional[str] = None
    using_metro_data: bool = False


class IRSAllowances(BaseModel):
    """IRS National and Local Standards allowed on Form B 122A-2."""

    model_config = {"frozen": True}

    national_standards: Decimal = Field(description="Food, clothing and other items")
    housing_utilities: Decimal = Field(description="Housing and utilities (county or state)")
    transportation: TransportationAllowance
    health_care: Decimal = Field(description="Out-of-pocket health care")
    total: Decimal

    # Advisory flags: False means a state, regional or national fallback was used
    using_county_data: bool = False
    using_metro_data: bool = False
    county: Optional[str] = None


class MeansTestResult(BaseModel):
    """Outcome of the Chapter 7 means test."""

    model_config = {"frozen": True}

    passes: bool
    annual_income: Decimal
    median_income: Decimal
    is_above_median: bool
    current_monthly_income: Decimal

    # Stage B only
    monthly_disposable_income: Optional[Decimal] = None
    sixty_month_disposable: Optional[Decimal] = None

    presumption_of_abuse: bool = False
    presumption_test_pending: bool = False
    reason: str

    allowances: IRSAllowances
    cmi: Optional[CMICalculation] = None

    stage_b_policy: StageBPolicy
    standards_version: str
    warnings: list[str] = Field(default_factory=list)
    audit_log: list[AuditEntry] = Field(default_factory=list)
