import pytest

from ratevault.cli import build_parser, main


def test_convert_infers_category(capsys):
    assert main(["convert", "1", "mi", "km"]) == 0
    assert capsys.readouterr().out.strip() == "1 mi = 1.609344 km"


def test_convert_temperature(capsys):
    assert main(["convert", "98.6", "f", "c"]) == 0
    assert capsys.readouterr().out.strip() == "98.6 °F = 37 °C"


def test_convert_with_explicit_category(capsys):
    # Without --category "c" would resolve to Celsius
    assert main(["convert", "1", "c", "mps", "--category", "speed"]) == 0
    assert capsys.readouterr().out.strip() == "1 c = 299,792,458 m/s"


def test_convert_indian_grouping(capsys):
    assert main(["convert", "1", "km", "mm", "-n", "indian"]) == 0
    assert capsys.readouterr().out.strip() == "1 km = 10,00,000 mm"


def test_number_system_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("RATEVAULT_NUMBER_SYSTEM", "eastern")
    assert main(["convert", "1", "km", "mm"]) == 0
    assert "10,00,000" in capsys.readouterr().out


def test_unknown_unit(capsys):
    assert main(["convert", "1", "zz", "m"]) == 1
    assert "Unknown unit: zz" in capsys.readouterr().err


def test_unit_outside_category(capsys):
    assert main(["convert", "1", "m", "lb", "--category", "length"]) == 1
    assert "Units not found: m or lb (category length)" in capsys.readouterr().err


def test_unknown_category(capsys):
    assert main(["convert", "1", "m", "ft", "--category", "nope"]) == 1
    assert "Category nope not found" in capsys.readouterr().err


def test_list_categories(capsys):
    assert main(["categories"]) == 0
    out = capsys.readouterr().out
    assert "length" in out
    assert "radiation" in out


def test_list_units(capsys):
    assert main(["units", "fuel"]) == 0
    out = capsys.readouterr().out
    assert "base unit: km/L" in out
    assert "l100km" in out


def test_list_units_unknown_category(capsys):
    assert main(["units", "nope"]) == 1
    assert "Unknown category: nope" in capsys.readouterr().err


def test_command_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
