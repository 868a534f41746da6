"""Central configuration for the tariff checker package."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Context, Decimal

EUR_TO_BGN = Decimal("1.95583")
VAT_RATE = Decimal("0.2")


@dataclass(slots=True, frozen=True)
class PayrollRates:
    """Third-category labour on an employment contract.

    Contribution rates are percentages; ``income_tax_rate`` is a fraction.
    """

    employee_pension: Decimal = Decimal("5.74")
    employee_supplementary_pension: Decimal = Decimal("2.2")
    employee_health: Decimal = Decimal("3.2")
    employer_pension: Decimal = Decimal("8.38")
    employer_supplementary_pension: Decimal = Decimal("2.8")
    employer_health: Decimal = Decimal("4.8")
    employer_guaranteed_receivables: Decimal = Decimal("0.06")
    employer_work_accident: Decimal = Decimal("0.5")
    income_tax_rate: Decimal = Decimal("0.1")
    max_insurance_income_bgn: Decimal = Decimal("3750")
    eur_to_bgn: Decimal = EUR_TO_BGN
    avg_wage_eur: Decimal = Decimal("1150")

    @property
    def employee_total_rate(self) -> Decimal:
        return (self.employee_pension + self.employee_supplementary_pension + self.employee_health) / 100

    @property
    def employer_total_rate(self) -> Decimal:
        return (
            self.employer_pension
            + self.employer_supplementary_pension
            + self.employer_health
            + self.employer_guaranteed_receivables
            + self.employer_work_accident
        ) / 100

    @property
    def max_insurance_income_eur(self) -> Decimal:
        return self.max_insurance_income_bgn / self.eur_to_bgn


DEFAULT_PAYROLL_RATES = PayrollRates()


@dataclass(slots=True, frozen=True)
class Settings:
    decimal_context: Context
    vat_rate: Decimal
    eur_to_bgn: Decimal
    payroll: PayrollRates = field(default_factory=PayrollRates)


SETTINGS = Settings(
    decimal_context=Context(prec=28),
    vat_rate=VAT_RATE,
    eur_to_bgn=EUR_TO_BGN,
    payroll=DEFAULT_PAYROLL_RATES,
)
