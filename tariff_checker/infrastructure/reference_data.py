"""Bundled reference rate tables.

Prices in EUR, converted from BGN at the fixed 1.95583 peg. Electricity
tariffs are the regulator's July 2025 - June 2026 decision; fuel prices are
from February 2025. Water, loan and telecom tables are representative offers.
"""
from __future__ import annotations

from decimal import Decimal as D

from tariff_checker.domain.models import (
    BillComponent,
    ElectricityProvider,
    FuelStation,
    GasProvider,
    InternetPlan,
    LoanProduct,
    TelecomPlan,
    WaterProvider,
)


def _components(energy: str, distribution: str, access: str, public_obligation: str) -> tuple[BillComponent, ...]:
    return (
        BillComponent("energy", "Електрическа енергия", D(energy), "energy"),
        BillComponent("transmission", "Пренос (ЕСО)", D("0.0091"), "transmission"),
        BillComponent("distribution", "Разпределение", D(distribution), "distribution"),
        BillComponent("distribution_access", "Достъп до мрежата", D(access), "distribution_access"),
        BillComponent("public_obligation", "Задължение към обществото", D(public_obligation), "public_obligation"),
        BillComponent("excise", "Акциз", D("0.001"), "excise"),
    )


ELECTRICITY_PROVIDERS: tuple[ElectricityProvider, ...] = (
    ElectricityProvider(
        id="electrohold",
        name="Електрохолд (бивш ЧЕЗ)",
        region="Западна България",
        day_rate=D("0.1359"),
        night_rate=D("0.0721"),
        single_rate=D("0.1359"),
        breakdown=_components("0.0563", "0.0241", "0.0082", "0.0145"),
        coverage_areas=(
            "София-град", "София-област", "Перник", "Кюстендил", "Благоевград",
            "Враца", "Монтана", "Видин", "Плевен", "Ловеч",
        ),
        url="https://www.electrohold.bg",
    ),
    ElectricityProvider(
        id="evn",
        name="EVN",
        region="Южна България",
        day_rate=D("0.1390"),
        night_rate=D("0.0753"),
        single_rate=D("0.1390"),
        breakdown=_components("0.0588", "0.0250", "0.0076", "0.0144"),
        coverage_areas=(
            "Пловдив", "Стара Загора", "Бургас", "Хасково", "Кърджали",
            "Смолян", "Пазарджик", "Сливен", "Ямбол",
        ),
        url="https://www.evn.bg",
    ),
    ElectricityProvider(
        id="energo_pro",
        name="Енерго-Про",
        region="Североизточна България",
        day_rate=D("0.1417"),
        night_rate=D("0.0773"),
        single_rate=D("0.1417"),
        breakdown=_components("0.0598", "0.0261", "0.0078", "0.0143"),
        coverage_areas=(
            "Варна", "Русе", "Добрич", "Шумен", "Търговище",
            "Разград", "Силистра", "Велико Търново", "Габрово",
        ),
        url="https://www.energo-pro.bg",
    ),
)

WATER_PROVIDERS: tuple[WaterProvider, ...] = (
    WaterProvider("sofiyska_voda", "Софийска вода", "София", D("0.7506"), D("0.1309"), D("0.3205"),
                  "https://www.sofiyskavoda.bg"),
    WaterProvider("vik_plovdiv", "ВиК Пловдив", "Пловдив", D("0.8537"), D("0.1176"), D("0.3426"),
                  "https://www.vikpd.bg"),
    WaterProvider("vik_varna", "ВиК Варна", "Варна", D("1.0225"), D("0.1432"), D("0.4039"),
                  "https://www.vikvarna.com"),
    WaterProvider("vik_burgas", "ВиК Бургас", "Бургас", D("1.0123"), D("0.1380"), D("0.3937"),
                  "https://www.vikburgas.com"),
)

GAS_PROVIDERS: tuple[GasProvider, ...] = (
    GasProvider(
        "overgas", "Овергаз Мрежи", "София и Югозападна България",
        D("0.5016"), D("0.0941"), D("0.0215"), D("0.0035"),
        ("София", "Перник", "Кюстендил", "Благоевград", "Дупница", "Банско", "Ботевград"),
        "https://www.overgas.bg",
    ),
    GasProvider(
        "citygas", "Ситигаз България", "Тракия",
        D("0.5088"), D("0.1002"), D("0.0215"), D("0.0035"),
        ("Пловдив", "Стара Загора", "Хасково", "Кърджали", "Пазарджик"),
        "https://www.citygas.bg",
    ),
    GasProvider(
        "chernomor", "Черноморска технологична компания", "Черноморие",
        D("0.5175"), D("0.1048"), D("0.0215"), D("0.0035"),
        ("Варна", "Бургас", "Добрич"),
        "https://www.chtk.bg",
    ),
    GasProvider(
        "rilgas", "Рилгаз", "Западна България",
        D("0.5241"), D("0.1074"), D("0.0215"), D("0.0035"),
        ("Враца", "Монтана", "Видин"),
    ),
    GasProvider(
        "sevliegas", "Севлиевогаз", "Централна България",
        D("0.5154"), D("0.1013"), D("0.0215"), D("0.0035"),
        ("Севлиево", "Габрово", "Велико Търново", "Ловеч"),
    ),
)


def _prices(a95: str, a98: str | None, diesel: str, lpg: str) -> dict[str, D | None]:
    return {"A95": D(a95), "A98": D(a98) if a98 is not None else None, "diesel": D(diesel), "lpg": D(lpg)}


FUEL_STATIONS: tuple[FuelStation, ...] = (
    FuelStation("shell", "shell", "Shell", _prices("1.30", "1.41", "1.29", "0.69"),
                True, D("1.5"), 115, "https://www.shell.bg"),
    FuelStation("omv", "omv", "OMV", _prices("1.29", "1.40", "1.28", "0.68"),
                True, D("2"), 95, "https://www.omv.bg"),
    FuelStation("lukoil", "lukoil", "Лукойл", _prices("1.27", "1.38", "1.26", "0.66"),
                True, D("1.5"), 210, "https://www.lukoil.bg"),
    FuelStation("eko", "eko", "Еко", _prices("1.28", "1.39", "1.27", "0.67"),
                True, D("1"), 100, "https://www.eko.bg"),
    FuelStation("petrol", "petrol", "Петрол", _prices("1.26", None, "1.25", "0.65"),
                False, D("0"), 300, "https://www.petrol.bg"),
    FuelStation("gazprom", "gazprom", "NIS Петрол (Газпром)", _prices("1.27", "1.37", "1.26", "0.66"),
                True, D("1"), 75, "https://www.nispetrol.bg"),
)

LOAN_PRODUCTS: tuple[LoanProduct, ...] = (
    LoanProduct("dsk_consumer", "dsk", "Банка ДСК", "Кредит за всеки", "consumer",
                D("8.9"), D("9.8"), D("500"), D("25000"), 6, 96, "https://dskbank.bg"),
    LoanProduct("ubb_consumer", "ubb", "ОББ", "Потребителски кредит", "consumer",
                D("7.95"), D("8.7"), D("1000"), D("30000"), 12, 120, "https://www.ubb.bg"),
    LoanProduct("postbank_consumer", "postbank", "Пощенска банка", "Потребителски кредит", "consumer",
                D("9.5"), D("10.4"), D("1000"), D("40000"), 12, 84, "https://www.postbank.bg"),
    LoanProduct("fibank_consumer", "fibank", "Fibank", "Кредит Бързо решение", "consumer",
                D("10.5"), D("11.6"), D("500"), D("15000"), 3, 60, "https://www.fibank.bg"),
    LoanProduct("unicredit_mortgage", "unicredit", "УниКредит Булбанк", "Жилищен кредит", "mortgage",
                D("2.6"), D("2.9"), D("10000"), D("500000"), 60, 360, "https://www.unicreditbulbank.bg"),
    LoanProduct("dsk_mortgage", "dsk", "Банка ДСК", "Жилищен кредит", "mortgage",
                D("2.45"), D("2.8"), D("15000"), D("600000"), 60, 360, "https://dskbank.bg"),
)

MOBILE_PLANS: tuple[TelecomPlan, ...] = (
    TelecomPlan("a1_prepaid_s", "a1", "A1", "Prepaid S", "prepaid", D("5.10"), D("5"), 300, 300),
    TelecomPlan("yettel_prepaid_10", "yettel", "Yettel", "Prepaid 10 GB", "prepaid", D("5.11"), D("10")),
    TelecomPlan("vivacom_prepaid_easy", "vivacom", "Vivacom", "Prepaid Easy", "prepaid", D("6.14"), D("12")),
    TelecomPlan("a1_unlimited_s", "a1", "A1", "Unlimited S", "postpaid", D("12.78"), D("30"),
                contract_months=24),
    TelecomPlan("yettel_unlimited_m", "yettel", "Yettel", "Unlimited M", "postpaid", D("15.34"), D("50"),
                contract_months=24, extras=("5G",)),
    TelecomPlan("vivacom_unlimited_max", "vivacom", "Vivacom", "Unlimited Max", "postpaid", D("20.45"), D("100"),
                contract_months=24, extras=("5G", "EU roaming")),
    TelecomPlan("a1_unlimited_max", "a1", "A1", "Unlimited Max", "postpaid", D("25.56"), D("150"),
                contract_months=24, extras=("5G", "EU roaming", "TV")),
)

INTERNET_PLANS: tuple[InternetPlan, ...] = (
    InternetPlan("a1_vdsl_50", "a1", "A1", "Home 50", 50, D("10.23"), "VDSL"),
    InternetPlan("vivacom_fiber_300", "vivacom", "Vivacom", "Fiber 300", 300, D("14.32"), "FTTH"),
    InternetPlan("yettel_home_5g", "yettel", "Yettel", "Home Internet 5G", 200, D("15.34"), "5G FWA"),
    InternetPlan("a1_fiber_500", "a1", "A1", "Fiber 500", 500, D("17.90"), "FTTH"),
    InternetPlan("vivacom_fiber_1000", "vivacom", "Vivacom", "Fiber 1 Gbps", 1000, D("23.01"), "FTTH"),
)
