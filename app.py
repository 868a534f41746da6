"""Streamlit front-end for the tariff comparators and the salary converter."""
from __future__ import annotations

from typing import Any, Callable, Sequence

import pandas as pd
import streamlit as st

from tariff_checker import BrowsePlansUseCase, CompareTariffsUseCase, ComparisonContext, ConvertSalaryUseCase
from tariff_checker.application.use_cases import PLAN_TYPES
from tariff_checker.domain.models import (
    FUEL_TYPES,
    LOAN_TYPES,
    ElectricityInput,
    FuelInput,
    GasInput,
    LoanInput,
    WaterInput,
)
from tariff_checker.domain.money import bgn_to_eur, eur_to_bgn, format_currency, format_number
from tariff_checker.errors import TariffCheckerError
from tariff_checker.infrastructure.repositories.table_repositories import (
    electricity_file_repository,
    fuel_file_repository,
    gas_file_repository,
    loan_file_repository,
    reference_repositories,
    water_file_repository,
)
from tariff_checker.presentation.report import (
    breakdown_to_rows,
    plans_to_rows,
    render_csv,
    render_html,
    results_to_rows,
)


st.set_page_config(page_title="Tariff Checker", layout="wide")
st.title("Tariff Checker")

FILE_REPOSITORIES: dict[str, Callable[..., Any]] = {
    "electricity": electricity_file_repository,
    "water": water_file_repository,
    "gas": gas_file_repository,
    "fuel": fuel_file_repository,
    "loans": loan_file_repository,
}


def build_context(uploads: dict[str, Any]) -> ComparisonContext:
    repositories = reference_repositories()
    for domain, upload in uploads.items():
        if upload is not None:
            repositories[domain] = FILE_REPOSITORIES[domain](upload.getvalue(), name=upload.name)
    return ComparisonContext(
        electricity_repository=repositories["electricity"],
        water_repository=repositories["water"],
        gas_repository=repositories["gas"],
        fuel_repository=repositories["fuel"],
        loan_repository=repositories["loans"],
    )


def show_results(domain: str, results: Sequence[Any]) -> None:
    rows = results_to_rows(results)
    if not rows:
        st.info("No matching offer for these inputs.")
        return
    idx = next(i for i, r in enumerate(results) if r.is_cheapest)
    name_column = next(iter(rows[idx]))
    st.success(f"Cheapest: {rows[idx][name_column]}")
    st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)
    col1, col2 = st.columns(2)
    col1.download_button(
        "Download CSV",
        data=render_csv(rows),
        file_name=f"{domain}_comparison.csv",
        mime="text/csv",
        key=f"download_{domain}",
    )
    col2.download_button(
        "Download HTML",
        data=render_html(rows).encode("utf-8"),
        file_name=f"{domain}_comparison.html",
        mime="text/html",
        key=f"download_html_{domain}",
    )


with st.sidebar:
    st.subheader("Rate tables")
    st.caption("Upload a CSV or Excel table to replace the bundled reference data.")
    uploads = {
        domain: st.file_uploader(domain.capitalize(), type=["csv", "xlsx"], key=f"upload_{domain}")
        for domain in FILE_REPOSITORIES
    }

try:
    use_case = CompareTariffsUseCase(build_context(uploads))
except TariffCheckerError as exc:
    st.error(str(exc))
    st.stop()

tabs = st.tabs(["Electricity", "Water", "Gas", "Fuel", "Loans", "Telecom", "Salary", "EUR/BGN"])

try:
    with tabs[0]:
        meter = st.radio("Meter", ["dual", "single"], horizontal=True)
        col1, col2 = st.columns(2)
        day_kwh = col1.number_input("Day kWh", min_value=0.0, value=200.0, step=10.0)
        night_kwh = col2.number_input("Night kWh", min_value=0.0, value=100.0, step=10.0)
        response = use_case.electricity(ElectricityInput(day_kwh, night_kwh, meter))
        show_results("electricity", response.results)

    with tabs[1]:
        water_m3 = st.number_input("Water m³", min_value=0.0, value=10.0, step=1.0)
        show_results("water", use_case.water(WaterInput(water_m3)).results)

    with tabs[2]:
        gas_m3 = st.number_input("Gas m³", min_value=0.0, value=100.0, step=10.0)
        show_results("gas", use_case.gas(GasInput(gas_m3)).results)

    with tabs[3]:
        col1, col2 = st.columns(2)
        fuel_type = col1.selectbox("Fuel", FUEL_TYPES)
        liters = col2.number_input("Litres per month", min_value=0.0, value=100.0, step=10.0)
        show_results("fuel", use_case.fuel(FuelInput(fuel_type, liters)).results)

    with tabs[4]:
        col1, col2, col3 = st.columns(3)
        loan_type = col1.selectbox("Type", LOAN_TYPES)
        amount = col2.number_input("Amount (EUR)", min_value=0.0, value=10000.0, step=500.0)
        term = col3.number_input("Term (months)", min_value=1, value=36, step=6)
        st.caption("Sorted by monthly payment; the badge marks the lowest total interest.")
        show_results("loans", use_case.loans(LoanInput(amount, term, loan_type)).results)

    with tabs[5]:
        repositories = reference_repositories()
        plans = BrowsePlansUseCase(repositories["mobile"], repositories["internet"])
        st.subheader("Mobile")
        col1, col2, col3 = st.columns(3)
        plan_type = col1.selectbox("Plan type", PLAN_TYPES)
        min_data = col2.number_input("Minimum data (GB)", min_value=0.0, value=0.0, step=5.0)
        operators = ["all", *sorted({p.operator for p in repositories["mobile"].list_records()})]
        operator = col3.selectbox("Operator", operators)
        mobile_rows = plans_to_rows(plans.mobile(plan_type, min_data, operator))
        if mobile_rows:
            st.dataframe(pd.DataFrame(mobile_rows), hide_index=True, use_container_width=True)
        else:
            st.info("No plan matches these filters.")

        st.subheader("Internet")
        col1, col2 = st.columns(2)
        min_speed = col1.number_input("Minimum speed (Mbps)", min_value=0, value=0, step=50)
        providers = ["all", *sorted({p.provider for p in repositories["internet"].list_records()})]
        provider = col2.selectbox("Provider", providers)
        internet_rows = plans_to_rows(plans.internet(min_speed, provider))
        if internet_rows:
            st.dataframe(pd.DataFrame(internet_rows), hide_index=True, use_container_width=True)
        else:
            st.info("No plan matches these filters.")

    with tabs[6]:
        salary = ConvertSalaryUseCase()
        direction = st.radio("Convert", ["Gross → Net", "Net → Gross"], horizontal=True)
        value = st.number_input("Monthly amount (EUR)", min_value=0.0, value=float(salary.rates.avg_wage_eur))
        breakdown = salary.from_gross(value) if direction == "Gross → Net" else salary.from_net(value)
        col1, col2, col3 = st.columns(3)
        col1.metric("Gross", format_currency(breakdown.gross_eur))
        col2.metric("Net", format_currency(breakdown.net_eur))
        col3.metric("Employer cost", format_currency(breakdown.total_cost_eur))
        if breakdown.above_insurance_ceiling:
            st.caption(f"Above the maximum insurable income ({format_currency(salary.rates.max_insurance_income_eur)})")
        st.dataframe(pd.DataFrame(breakdown_to_rows(breakdown)), hide_index=True)

    with tabs[7]:
        col1, col2 = st.columns(2)
        bgn = col1.number_input("BGN", min_value=0.0, value=100.0)
        col1.write(format_currency(bgn_to_eur(bgn)))
        eur = col2.number_input("EUR", min_value=0.0, value=50.0)
        col2.write(f"{format_number(eur_to_bgn(eur))} лв.")
except TariffCheckerError as exc:
    st.error(str(exc))
