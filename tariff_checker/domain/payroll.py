"""Net/gross salary conversion with a capped contribution base.

Employee contributions and employer contributions are charged on the
insurable income, which is the gross salary capped at the statutory
ceiling. Income tax is flat on gross minus employee contributions.
"""
from __future__ import annotations

from decimal import Decimal

from tariff_checker.config import DEFAULT_PAYROLL_RATES, PayrollRates

from .money import Number, to_decimal
from .results import PayrollBreakdown

ZERO = Decimal("0")


def net_from_gross(gross_eur: Number, rates: PayrollRates = DEFAULT_PAYROLL_RATES) -> PayrollBreakdown:
    gross = to_decimal(gross_eur)
    insurable = min(gross, rates.max_insurance_income_eur)

    pension = insurable * rates.employee_pension / 100
    supplementary_pension = insurable * rates.employee_supplementary_pension / 100
    health = insurable * rates.employee_health / 100
    total_employee_insurance = pension + supplementary_pension + health

    taxable = gross - total_employee_insurance
    income_tax = taxable * rates.income_tax_rate
    net = taxable - income_tax

    employer_insurance = insurable * rates.employer_total_rate

    return PayrollBreakdown(
        gross_eur=gross,
        insurable_income_eur=insurable,
        employee_pension_eur=pension,
        employee_supplementary_pension_eur=supplementary_pension,
        employee_health_eur=health,
        total_employee_insurance_eur=total_employee_insurance,
        taxable_income_eur=taxable,
        income_tax_eur=income_tax,
        net_eur=net,
        employer_insurance_eur=employer_insurance,
        total_cost_eur=gross + employer_insurance,
        effective_tax_rate=(gross - net) / gross if gross > 0 else ZERO,
        net_to_gross_ratio=net / gross if gross > 0 else ZERO,
    )


def gross_from_net(net_eur: Number, rates: PayrollRates = DEFAULT_PAYROLL_RATES) -> PayrollBreakdown:
    """Invert :func:`net_from_gross` in closed form.

    Below the ceiling net is linear in gross:
        net = gross * (1 - employee_total) * (1 - tax)
    Above it the contributions are fixed:
        net = (1 - tax) * (gross - ceiling * employee_total)
    Either way the breakdown comes from ``net_from_gross``.
    """
    net = to_decimal(net_eur)
    keep_after_tax = 1 - rates.income_tax_rate
    ceiling = rates.max_insurance_income_eur

    gross_estimate = net / ((1 - rates.employee_total_rate) * keep_after_tax)
    if gross_estimate <= ceiling:
        return net_from_gross(gross_estimate, rates)

    gross = net / keep_after_tax + ceiling * rates.employee_total_rate
    return net_from_gross(gross, rates)
