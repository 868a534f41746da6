"""Tariff comparison and net/gross salary conversion toolkit."""
from tariff_checker.application.use_cases import (
    BrowsePlansUseCase,
    CompareTariffsUseCase,
    ComparisonContext,
    ConvertSalaryUseCase,
)
from tariff_checker.domain.payroll import gross_from_net, net_from_gross
from tariff_checker.domain.ranking import rank_results
from tariff_checker.domain.tariffs import (
    compare_electricity,
    compare_fuel,
    compare_gas,
    compare_loans,
    compare_water,
)

__all__ = [
    "BrowsePlansUseCase",
    "CompareTariffsUseCase",
    "ComparisonContext",
    "ConvertSalaryUseCase",
    "compare_electricity",
    "compare_water",
    "compare_gas",
    "compare_fuel",
    "compare_loans",
    "net_from_gross",
    "gross_from_net",
    "rank_results",
]
