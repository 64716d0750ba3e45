"""Tests for the two-stage means test decision engine.

Covers:
- Stage A median comparison (strict greater-than)
- Stage B simplified disposable income and presumption of abuse
- Stage B deferred policy
- Ledger-driven CMI, input validation, warnings and audit trail
"""

from decimal import Decimal

import pytest

from chapter7_core import (
    EngineConfig,
    HouseholdProfile,
    MeansTestEngine,
    MonthlyIncomeEntry,
    StageBPolicy,
    ValidationError,
    calculate_means_test,
    get_standards,
)
from chapter7_core.exceptions import ConfigurationError


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def engine() -> MeansTestEngine:
    """Engine with the canonical simplified Stage B policy."""
    return MeansTestEngine(config=EngineConfig(env="test"))


@pytest.fixture
def deferred_engine() -> MeansTestEngine:
    """Engine that defers above-median determinations."""
    return MeansTestEngine(
        config=EngineConfig(env="test", stage_b_policy=StageBPolicy.DEFERRED)
    )


@pytest.fixture
def california_single() -> HouseholdProfile:
    """Single filer in California, no county given, one car.

    Allowances: 1065 national + 2430 housing + 959 transportation + 75 health = 4529.
    """
    return HouseholdProfile(state="CA", household_size=1, primary_age=40, vehicle_count=1)


def six_month_ledger(gross: str) -> list[MonthlyIncomeEntry]:
    return [
        MonthlyIncomeEntry(income_month=f"2025-{m:02d}", gross_amount=Decimal(gross))
        for m in range(1, 7)
    ]


# =============================================================================
# STAGE A
# =============================================================================

class TestStageA:
    """Tests for the median income comparison."""

    def test_below_median_passes(self, engine, california_single):
        """$3,000/month in CA (annual $36,000 < $77,221) passes."""
        result = engine.evaluate(california_single, monthly_gross_income=Decimal("3000"))

        assert result.annual_income == Decimal("36000.00")
        assert result.median_income == Decimal("77221.00")
        assert result.is_above_median is False
        assert result.passes is True
        assert result.presumption_of_abuse is False
        assert result.presumption_test_pending is False
        assert "below state median" in result.reason
        assert result.monthly_disposable_income is None
        assert result.sixty_month_disposable is None

    def test_allowances_attached_below_median(self, engine, california_single):
        """Allowances are populated even on the fast path."""
        result = engine.evaluate(california_single, monthly_gross_income=Decimal("3000"))

        assert result.allowances.national_standards == Decimal("1065.00")
        assert result.allowances.total == Decimal("4529.00")

    def test_equal_to_median_is_not_above(self, engine):
        """Annual income exactly at the median is not above it."""
        profile = HouseholdProfile(state="PR", household_size=1)
        result = engine.evaluate(profile, monthly_gross_income=Decimal("5000"))

        assert result.annual_income == result.median_income == Decimal("60000.00")
        assert result.is_above_median is False
        assert result.passes is True

    def test_one_cent_over_median_is_above(self, engine):
        """A cent above the median annualizes above it."""
        profile = HouseholdProfile(state="PR", household_size=1)
        result = engine.evaluate(profile, monthly_gross_income=Decimal("5000.01"))

        assert result.is_above_median is True

    def test_large_household_median(self, engine):
        """Households over four extrapolate the median."""
        profile = HouseholdProfile(state="CA", household_size=6)
        result = engine.evaluate(profile, monthly_gross_income=Decimal("1000"))

        assert result.median_income == Decimal("157705.00")


# =============================================================================
# STAGE B - SIMPLIFIED
# =============================================================================

class TestSimplifiedStageB:
    """Tests for the simplified disposable income policy."""

    def test_above_median_presumption(self, engine, california_single):
        """$8,000/month in CA is above median and presumes abuse."""
        result = engine.evaluate(california_single, monthly_gross_income=Decimal("8000"))

        assert result.annual_income == Decimal("96000.00")
        assert result.is_above_median is True
        assert result.allowances.national_standards == Decimal("1065.00")
        assert result.monthly_disposable_income == Decimal("3471.00")
        assert result.sixty_month_disposable == Decimal("208260.00")
        assert result.presumption_of_abuse is True
        assert result.passes is False
        assert result.stage_b_policy == StageBPolicy.SIMPLIFIED
        assert "Presumption of abuse" in result.reason
        assert "$3,471.00/mo" in result.reason

    def test_actual_expenses_above_allowances_are_used(self, engine, california_single):
        """Actual expenses larger than the standards replace them."""
        result = engine.evaluate(
            california_single,
            monthly_gross_income=Decimal("6500"),
            monthly_expenses=Decimal("6400"),
            total_unsecured_debt=Decimal("100000"),
        )

        assert result.monthly_disposable_income == Decimal("100.00")
        assert result.sixty_month_disposable == Decimal("6000.00")
        assert result.presumption_of_abuse is False
        assert result.passes is True
        assert result.reason == "Above median income but disposable income is below abuse threshold"

    def test_debt_share_triggers_presumption(self, engine, california_single):
        """60-month disposable income covering 25% of unsecured debt presumes abuse."""
        result = engine.evaluate(
            california_single,
            monthly_gross_income=Decimal("6500"),
            monthly_expenses=Decimal("6400"),
            total_unsecured_debt=Decimal("20000"),
        )

        assert result.presumption_of_abuse is True
        assert result.passes is False

    def test_upper_threshold_boundary(self, engine, california_single):
        """Exactly $252.50/month reaches the upper threshold."""
        at_threshold = engine.evaluate(
            california_single,
            monthly_gross_income=Decimal("8000"),
            monthly_expenses=Decimal("7747.50"),
            total_unsecured_debt=Decimal("1000000"),
        )
        below_threshold = engine.evaluate(
            california_single,
            monthly_gross_income=Decimal("8000"),
            monthly_expenses=Decimal("7747.51"),
            total_unsecured_debt=Decimal("1000000"),
        )

        assert at_threshold.sixty_month_disposable == Decimal("15150.00")
        assert at_threshold.presumption_of_abuse is True
        assert below_threshold.presumption_of_abuse is False

    def test_negative_disposable_income(self, engine, california_single):
        """Expenses above income leave no disposable income and no presumption."""
        result = engine.evaluate(
            california_single,
            monthly_gross_income=Decimal("6500"),
            monthly_expenses=Decimal("10000"),
        )

        assert result.monthly_disposable_income == Decimal("-3500.00")
        assert result.presumption_of_abuse is False
        assert result.passes is True

    def test_zero_disposable_income_without_debt(self, engine, california_single):
        """No surplus and no unsecured debt do not presume abuse."""
        result = engine.evaluate(
            california_single,
            monthly_gross_income=Decimal("6500"),
            monthly_expenses=Decimal("6500"),
            total_unsecured_debt=Decimal("0"),
        )

        assert result.monthly_disposable_income == Decimal("0.00")
        assert result.sixty_month_disposable == Decimal("0.00")
        assert result.presumption_of_abuse is False
        assert result.passes is True


# =============================================================================
# STAGE B - DEFERRED
# =============================================================================

class TestDeferredStageB:
    """Tests for the deferred policy."""

    def test_above_median_pending(self, deferred_engine, california_single):
        """Above-median households are reported pending."""
        result = deferred_engine.evaluate(california_single, monthly_gross_income=Decimal("8000"))

        assert result.is_above_median is True
        assert result.passes is False
        assert result.presumption_of_abuse is False
        assert result.presumption_test_pending is True
        assert result.monthly_disposable_income is None
        assert result.stage_b_policy == StageBPolicy.DEFERRED
        assert "Form 122A-2" in result.reason
        assert result.allowances.national_standards == Decimal("1065.00")

    def test_below_median_unaffected(self, deferred_engine, california_single):
        """The policy only matters above the median."""
        result = deferred_engine.evaluate(california_single, monthly_gross_income=Decimal("3000"))

        assert result.passes is True
        assert result.presumption_test_pending is False

    def test_policy_from_environment(self, monkeypatch, california_single):
        """The policy can be switched engine-wide through the environment."""
        monkeypatch.setenv("CHAPTER7_STAGE_B_POLICY", "deferred")
        result = calculate_means_test(california_single, monthly_gross_income=Decimal("8000"))

        assert result.presumption_test_pending is True


# =============================================================================
# INCOME LEDGER
# =============================================================================

class TestIncomeLedger:
    """Tests for ledger-driven current monthly income."""

    def test_ledger_drives_stage_a(self, engine, california_single):
        """The CMI average feeds the median comparison."""
        result = engine.evaluate(california_single, income_entries=six_month_ledger("7000"))

        assert result.cmi is not None
        assert result.cmi.is_complete is True
        assert result.current_monthly_income == Decimal("7000.00")
        assert result.annual_income == Decimal("84000.00")
        assert result.is_above_median is True
        assert result.warnings == []

    def test_incomplete_ledger_warns(self, engine, california_single):
        """A short ledger still divides by six and adds a warning."""
        ledger = six_month_ledger("3000")[:3]
        result = engine.evaluate(california_single, income_entries=ledger)

        assert result.current_monthly_income == Decimal("1500.00")
        assert any("3 of 6 months" in w for w in result.warnings)

    def test_single_figure_has_no_cmi(self, engine, california_single):
        """A direct monthly figure carries no CMI breakdown."""
        result = engine.evaluate(california_single, monthly_gross_income="3000")
        assert result.cmi is None


# =============================================================================
# VALIDATION
# =============================================================================

class TestValidation:
    """Tests for rejected inputs."""

    def test_neither_income_input(self, engine, california_single):
        """One income input is required."""
        with pytest.raises(ValidationError):
            engine.evaluate(california_single)

    def test_both_income_inputs(self, engine, california_single):
        """Both income inputs are ambiguous."""
        with pytest.raises(ValidationError):
            engine.evaluate(
                california_single,
                monthly_gross_income=Decimal("3000"),
                income_entries=six_month_ledger("3000"),
            )

    @pytest.mark.parametrize(
        "kwargs,field",
        [
            ({"monthly_gross_income": Decimal("-1")}, "monthly_gross_income"),
            ({"monthly_gross_income": Decimal("1"), "monthly_expenses": Decimal("-1")}, "monthly_expenses"),
            ({"monthly_gross_income": Decimal("1"), "total_unsecured_debt": Decimal("-1")}, "total_unsecured_debt"),
        ],
    )
    def test_negative_amounts(self, engine, california_single, kwargs, field):
        """Negative amounts are rejected, not clamped."""
        with pytest.raises(ValidationError) as exc_info:
            engine.evaluate(california_single, **kwargs)

        assert exc_info.value.field == field

    @pytest.mark.parametrize(
        "kwargs,field",
        [
            ({"monthly_gross_income": float("nan")}, "monthly_gross_income"),
            ({"monthly_gross_income": float("inf")}, "monthly_gross_income"),
            ({"monthly_gross_income": Decimal("Infinity")}, "monthly_gross_income"),
            ({"monthly_gross_income": Decimal("1"), "monthly_expenses": float("nan")}, "monthly_expenses"),
            ({"monthly_gross_income": Decimal("1"), "total_unsecured_debt": Decimal("NaN")}, "total_unsecured_debt"),
            ({"monthly_gross_income": "three thousand"}, "monthly_gross_income"),
        ],
    )
    def test_non_finite_amounts(self, engine, california_single, kwargs, field):
        """NaN, infinity and unparseable amounts are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            engine.evaluate(california_single, **kwargs)

        assert exc_info.value.field == field
        assert exc_info.value.constraint == "finite, >= 0"

    def test_unknown_standards_version(self):
        """Configuring an unregistered version fails at construction."""
        with pytest.raises(ConfigurationError):
            MeansTestEngine(config=EngineConfig(standards_version="1999-01"))


# =============================================================================
# WARNINGS, AUDIT AND DETERMINISM
# =============================================================================

class TestResultMetadata:
    """Tests for warnings, audit trail and determinism."""

    def test_unknown_state_warnings(self, engine):
        """Estimated median and housing produce warnings, not errors."""
        profile = HouseholdProfile(state="PR", household_size=2)
        result = engine.evaluate(profile, monthly_gross_income=Decimal("1000"))

        assert any("median income" in w for w in result.warnings)
        assert any("housing standard" in w for w in result.warnings)

    def test_county_fallback_warning(self, engine):
        """A county without data notes the state default."""
        profile = HouseholdProfile(state="CA", county="Mono County", household_size=1)
        result = engine.evaluate(profile, monthly_gross_income=Decimal("1000"))

        assert result.allowances.using_county_data is False
        assert any("MONO" in w for w in result.warnings)

    def test_audit_trail_references_form_lines(self, engine, california_single):
        """Audit entries cite the official form lines."""
        result = engine.evaluate(california_single, monthly_gross_income=Decimal("8000"))
        lines = {entry.line_number for entry in result.audit_log}

        assert "Form 122A-1 Line 11" in lines
        assert "Form 122A-1 Line 14" in lines
        assert "Form 122A-2 Line 6" in lines
        assert "Form 122A-2 Line 40" in lines

    def test_audit_trail_can_be_disabled(self, california_single):
        """The audit trail is omitted when disabled."""
        engine = MeansTestEngine(config=EngineConfig(env="test", record_audit_trail=False))
        result = engine.evaluate(california_single, monthly_gross_income=Decimal("8000"))

        assert result.audit_log == []

    def test_deterministic(self, engine, california_single):
        """Repeated calls produce identical results."""
        first = engine.evaluate(california_single, income_entries=six_month_ledger("7000"))
        second = engine.evaluate(california_single, income_entries=six_month_ledger("7000"))

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_standards_version_recorded(self, engine, california_single):
        """The result names the standards version used."""
        result = engine.evaluate(california_single, monthly_gross_income=Decimal("3000"))
        assert result.standards_version == "2025-11"

    def test_injected_standards(self, california_single):
        """An explicitly injected table set is used."""
        engine = MeansTestEngine(standards=get_standards("2025-11"), config=EngineConfig(env="test"))
        assert engine.evaluate(california_single, monthly_gross_income=Decimal("3000")).passes is True

    def test_median_comparison_uses_unrounded_income(self, engine, california_single):
        """Sub-cent income is compared exactly and only rounded for display."""
        result = engine.evaluate(california_single, monthly_gross_income=Decimal("6435.085"))

        assert result.is_above_median is True
        assert result.annual_income == Decimal("77221.02")
        assert result.current_monthly_income == Decimal("6435.08")

    def test_emitted_income_uses_half_even(self, engine, california_single):
        """Emitted income is quantized with banker's rounding."""
        result = engine.evaluate(california_single, monthly_gross_income=Decimal("3000.005"))

        assert result.current_monthly_income == Decimal("3000.00")
        assert result.annual_income == Decimal("36000.06")
