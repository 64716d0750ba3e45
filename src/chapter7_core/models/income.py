"""Income ledger models for the Current Monthly Income (CMI) calculation.

Income is tracked by calendar month (YYYY-MM). Form B 122A-1 averages the
income received during the 6 full calendar months before filing.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class IncomeSource(str, Enum):
    """Income source types per Form B 122A-1."""
    EMPLOYMENT = "employment"            # Line 2: wages, salary, tips, bonuses
    SELF_EMPLOYMENT = "self_employment"  # Line 5: business, profession or farm
    RENTAL = "rental"                    # Line 6: rent and real property
    INTEREST = "interest"                # Line 7: interest, dividends, royalties
    PENSION = "pension"                  # Line 9: pension and retirement
    GOVERNMENT = "government"            # Line 8: unemployment, disability
    SPOUSE = "spouse"                    # Column B: spouse income
    ALIMONY = "alimony"                  # Line 3: alimony and maintenance
    CONTRIBUTIONS = "contributions"      # Line 4: regular household contributions
    OTHER = "other"                      # Line 10: other income


class PayPeriod(str, Enum):
    """Pay frequencies that can be converted to a monthly figure."""
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    ANNUAL = "annual"


class MonthlyIncomeEntry(BaseModel):
    """A single income receipt attributed to a calendar month."""

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "income_month": "2025-06",
                    "gross_amount": "4200.00",
                    "net_amount": "3310.55",
                    "income_source": "employment",
                    "payer": "Acme Corp",
                }
            ]
        },
    }

    income_month: str = Field(
        pattern=r"^\d{4}-(0[1-9]|1[0-2])$",
        description="Calendar month key in YYYY-MM form",
    )
    gross_amount: Decimal = Field(
        ge=Decimal("0"),
        description="Gross amount received",
    )
    net_amount: Optional[Decimal] = Field(
        default=None,
        description="Net amount received, if known",
    )
    income_source: IncomeSource = Field(
        default=IncomeSource.EMPLOYMENT,
        description="Form B 122A-1 income category",
    )
    payer: Optional[str] = Field(
        default=None,
        description="Employer or payer label",
    )

    @field_validator("gross_amount", "net_amount", mode="before")
    @classmethod
    def coerce_amount_to_decimal(cls, v):
        """Coerce string and float amounts to Decimal."""
        if isinstance(v, (str, float)):
            return Decimal(str(v))
        return v


class SourceSubtotal(BaseModel):
    """Gross income of one source within a month."""
    model_config = {"frozen": True}

    source: IncomeSource
    amount: Decimal


class MonthlyIncomeSummary(BaseModel):
    """All income entries of one calendar month, combined."""
    model_config = {"frozen": True}

    month: str
    total_gross: Decimal
    total_net: Optional[Decimal] = None  # None when no entry carried a net amount
    sources: list[SourceSubtotal] = Field(default_factory=list)


class CMICalculation(BaseModel):
    """Current Monthly Income per Form B 122A-1, Line 11."""
    model_config = {"frozen": True}

    monthly_incomes: list[MonthlyIncomeSummary] = Field(default_factory=list)
    six_month_total: Decimal
    current_monthly_income: Decimal
    months_covered: int = Field(ge=0, le=6)
    is_complete: bool
