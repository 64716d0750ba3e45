"""Current Monthly Income (CMI) per Form B 122A-1.

CMI is the average monthly income over the 6 full calendar months before
filing. The total is always divided by 6, even when fewer months have
recorded income: a month without income counts as zero, the same way the
official form is filled in.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Optional

import structlog

from .models.income import (
    CMICalculation,
    IncomeSource,
    MonthlyIncomeEntry,
    MonthlyIncomeSummary,
    PayPeriod,
    SourceSubtotal,
)
from .money import ZERO, MoneyInput, to_decimal, to_money

logger = structlog.get_logger()

CMI_MONTHS = 6

# Monthly conversion factors for pay periods
PAY_PERIOD_FACTORS = {
    PayPeriod.WEEKLY: Decimal("4.33"),
    PayPeriod.BIWEEKLY: Decimal("2.17"),
    PayPeriod.MONTHLY: Decimal("1"),
}


def monthly_amount(amount: MoneyInput, period: PayPeriod) -> Decimal:
    """Convert a per-period gross amount to a monthly figure.

    Args:
        amount: Gross amount per pay period
        period: Pay frequency

    Returns:
        Monthly amount quantized to cents
    """
    value = to_decimal(amount)
    if period == PayPeriod.ANNUAL:
        return to_money(value / 12)
    return to_money(value * PAY_PERIOD_FACTORS[period])


class CMICalculator:
    """Group an income ledger by month and average the 6 most recent months."""

    def summarize_months(
        self, entries: Iterable[MonthlyIncomeEntry]
    ) -> list[MonthlyIncomeSummary]:
        """Combine entries per calendar month, most recent month first."""
        gross: dict[str, Decimal] = defaultdict(lambda: ZERO)
        net: dict[str, Optional[Decimal]] = {}
        by_source: dict[str, dict[IncomeSource, Decimal]] = defaultdict(dict)

        for entry in entries:
            month = entry.income_month
            gross[month] += entry.gross_amount
            if entry.net_amount is not None:
                net[month] = (net.get(month) or ZERO) + entry.net_amount
            sources = by_source[month]
            sources[entry.income_source] = (
                sources.get(entry.income_source, ZERO) + entry.gross_amount
            )

        summaries = []
        for month in sorted(gross, reverse=True):
            month_net = net.get(month)
            summaries.append(
                MonthlyIncomeSummary(
                    month=month,
                    total_gross=to_money(gross[month]),
                    total_net=to_money(month_net) if month_net is not None else None,
                    sources=[
                        SourceSubtotal(source=source, amount=to_money(by_source[month][source]))
                        for source in IncomeSource
                        if source in by_source[month]
                    ],
                )
            )
        return summaries

    def calculate(self, entries: Iterable[MonthlyIncomeEntry]) -> CMICalculation:
        """Calculate CMI from an income ledger.

        Args:
            entries: Income entries in any order, across any number of months

        Returns:
            CMICalculation covering at most the 6 most recent months
        """
        summaries = self.summarize_months(entries)
        selected = summaries[:CMI_MONTHS]
        dropped = len(summaries) - len(selected)

        six_month_total = sum((summary.total_gross for summary in selected), ZERO)
        current_monthly_income = to_money(six_month_total / CMI_MONTHS)

        logger.info(
            "cmi_calculated",
            months_covered=len(selected),
            months_dropped=dropped,
            six_month_total=str(six_month_total),
            current_monthly_income=str(current_monthly_income),
        )

        return CMICalculation(
            monthly_incomes=selected,
            six_month_total=to_money(six_month_total),
            current_monthly_income=current_monthly_income,
            months_covered=len(selected),
            is_complete=len(selected) >= CMI_MONTHS,
        )


def calculate_cmi(entries: Iterable[MonthlyIncomeEntry]) -> CMICalculation:
    """Current Monthly Income for a ledger of income entries."""
    return CMICalculator().calculate(entries)
