#!/usr/bin/env python3
"""
Chapter 7 Means Test Demonstration

This script demonstrates the complete means test workflow:
1. Describe a household and its last six months of income
2. Compute Current Monthly Income and the IRS allowances
3. Run the two-stage eligibility decision

Run: python examples/means_test_demo.py
"""

from decimal import Decimal

from chapter7_core import (
    EngineConfig,
    HouseholdProfile,
    IncomeSource,
    MeansTestEngine,
    MonthlyIncomeEntry,
    StageBPolicy,
)


def create_sample_household() -> HouseholdProfile:
    """Family of three in Harris County, Texas, with one car."""
    return HouseholdProfile(
        state="TX",
        county="Harris County",
        household_size=3,
        primary_age=44,
        vehicle_count=1,
        member_ages=[44, 41, 12],
    )


def create_sample_ledger() -> list[MonthlyIncomeEntry]:
    """Six months of wages plus an occasional side gig."""
    ledger = [
        MonthlyIncomeEntry(
            income_month=f"2025-{month:02d}",
            gross_amount=Decimal("7850.00"),
            net_amount=Decimal("6120.40"),
            income_source=IncomeSource.EMPLOYMENT,
            payer="Gulf Coast Logistics",
        )
        for month in range(4, 10)
    ]
    ledger.append(
        MonthlyIncomeEntry(
            income_month="2025-08",
            gross_amount=Decimal("1200.00"),
            income_source=IncomeSource.SELF_EMPLOYMENT,
            payer="Weekend deliveries",
        )
    )
    return ledger


def main():
    print("=" * 70)
    print("Chapter 7 Means Test - Demo")
    print("=" * 70)
    print()

    household = create_sample_household()
    ledger = create_sample_ledger()

    engine = MeansTestEngine(config=EngineConfig())
    result = engine.evaluate(
        household,
        income_entries=ledger,
        monthly_expenses=Decimal("7400.00"),
        total_unsecured_debt=Decimal("48000.00"),
    )

    print("Income history (Form 122A-1):")
    for month in result.cmi.monthly_incomes:
        sources = ", ".join(f"{s.source.value}=${s.amount:,}" for s in month.sources)
        print(f"  {month.month}: ${month.total_gross:>12,}  ({sources})")
    print(f"  Current monthly income: ${result.current_monthly_income:,}")
    print()

    allowances = result.allowances
    transportation = allowances.transportation
    print("IRS allowances (Form 122A-2):")
    print(f"  National standards:     ${allowances.national_standards:>10,}")
    print(f"  Health care:            ${allowances.health_care:>10,}")
    print(f"  Housing and utilities:  ${allowances.housing_utilities:>10,}"
          f"  ({'county' if allowances.using_county_data else 'state default'})")
    print(f"  Vehicle ownership:      ${transportation.ownership:>10,}")
    print(f"  Vehicle operating:      ${transportation.operating:>10,}"
          f"  ({transportation.metro_area or transportation.region.value})")
    print(f"  Public transportation:  ${transportation.public_transit:>10,}")
    print(f"  Total:                  ${allowances.total:>10,}")
    print()

    print("Determination:")
    print(f"  Annual income:  ${result.annual_income:,}")
    print(f"  State median:   ${result.median_income:,}")
    print(f"  Above median:   {result.is_above_median}")
    if result.monthly_disposable_income is not None:
        print(f"  Disposable:     ${result.monthly_disposable_income:,}/mo "
              f"(${result.sixty_month_disposable:,} over 60 months)")
    print(f"  Passes:         {result.passes}")
    print(f"  Reason:         {result.reason}")
    for warning in result.warnings:
        print(f"  Warning:        {warning}")
    print()

    # Same household under the deferred policy
    deferred = MeansTestEngine(config=EngineConfig(stage_b_policy=StageBPolicy.DEFERRED))
    pending = deferred.evaluate(household, income_entries=ledger)
    print(f"Deferred policy: passes={pending.passes}, pending={pending.presumption_test_pending}")
    print()

    print("=" * 70)
    print("Demo complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
