from pathlib import Path

from tariff_checker.cli import main


def test_fuel_command(capsys):
    assert main(["fuel", "A98", "100"]) == 0

    out = capsys.readouterr().out
    assert "NIS Петрол (Газпром)" in out
    assert not any(line.startswith("Петрол ") for line in out.splitlines())


def test_salary_command(capsys):
    assert main(["salary", "net", "1000"]) == 0

    assert "799.74" in capsys.readouterr().out


def test_convert_command(capsys):
    assert main(["convert", "195.583"]) == 0
    assert capsys.readouterr().out.strip() == "100.00 €"

    assert main(["convert", "100", "--to", "bgn"]) == 0
    assert capsys.readouterr().out.strip() == "195.58 лв."


def test_invalid_input_exit_code(capsys):
    assert main(["water", "abc"]) == 2

    assert "consumption_m3" in capsys.readouterr().err


def test_custom_table(tmp_path: Path, capsys):
    table = tmp_path / "water.csv"
    table.write_text(
        "id,name,city,supply_rate,sewerage_rate,treatment_rate\nx,Test Water,Town,1,0.5,0.25\n",
        encoding="utf-8",
    )

    assert main(["water", "10", "--table", str(table)]) == 0

    out = capsys.readouterr().out
    assert "Test Water" in out
    assert "21.00" in out


def test_no_offer(capsys):
    assert main(["loans", "5000000", "36", "--type", "mortgage"]) == 0

    assert "No matching offer." in capsys.readouterr().out


def test_missing_table_file(tmp_path: Path, capsys):
    assert main(["gas", "10", "--table", str(tmp_path / "nope.csv")]) == 2


def test_table_shows_components_missing_from_first_row(tmp_path: Path, capsys):
    table = tmp_path / "electricity.csv"
    table.write_text(
        "id,name,region,day_rate,night_rate,single_rate,component:energy,component:excise\n"
        "alpha,Alpha,West,0.10,0.05,0.10,,0.001\n"
        "beta,Beta,East,0.12,0.06,0.12,0.05,0.001\n",
        encoding="utf-8",
    )

    assert main(["electricity", "100", "0", "--table", str(table)]) == 0

    header, _, first, second = capsys.readouterr().out.splitlines()
    assert header.split()[-1] == "energy"
    assert second.split()[-1] == "6.00"
    assert first.split()[-1] == "yes"


def test_mobile_command(capsys):
    assert main(["mobile", "--type", "prepaid", "--operator", "yettel"]) == 0

    header, _, *lines = capsys.readouterr().out.splitlines()
    assert header.split()[:2] == ["operator", "plan"]
    assert len(lines) == 1
    assert "Prepaid 10 GB" in lines[0]
    assert "unlimited" in lines[0]


def test_internet_command(capsys):
    assert main(["internet", "--min-speed", "1000"]) == 0

    out = capsys.readouterr().out
    assert "Fiber 1 Gbps" in out
    assert "1 Gbps" in out
    assert "Home 50" not in out


def test_mobile_invalid_data_threshold(capsys):
    assert main(["mobile", "--min-data", "-5"]) == 2

    assert "min_data_gb" in capsys.readouterr().err
