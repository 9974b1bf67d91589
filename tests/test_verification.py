import json
from pathlib import Path

import pytest

from verification import comparator, loader, reporter, runner, schemas
from verification.cli import main as verification_main, run_verification

REPO_TEST_VALUES = Path(__file__).resolve().parent.parent / "test_values"


def _write_table(directory, table_id, data):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{table_id}_reference.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def table_dir(tmp_path):
    directory = tmp_path / "test_values"
    _write_table(directory, "length", {
        "category": "Distance",
        "tolerance": 1e-6,
        "cases": [
            {"value": 1, "from": "mi", "to": "km", "expected": 1.609344},
            {"value": 1, "from": "m", "to": "lb", "expected_error": "UnitNotFoundError"},
        ],
    })
    _write_table(directory, "wrong", {
        "category": "length",
        "cases": [
            {"value": 1, "from": "ft", "to": "in", "expected": 13},
        ],
    })
    return directory


def test_validate_reference_accepts_good_table():
    data = {"category": "length", "cases": [{"value": 1, "from": "m", "to": "ft", "expected": 3.28084}]}
    assert schemas.validate_reference(data) == []


def test_validate_reference_reports_problems():
    data = {
        "category": 5,
        "tolerance": -1,
        "cases": [
            "not a case",
            {"value": "one", "from": "m", "to": "ft", "expected": 1},
            {"value": 1, "from": "m", "to": "ft"},
            {"value": 1, "from": "m", "to": "ft", "expected": 1, "expected_error": "UnitNotFoundError"},
        ],
    }
    paths = [error.path for error in schemas.validate_reference(data)]
    assert "category" in paths
    assert "tolerance" in paths
    assert "cases[0]" in paths
    assert "cases[1].value" in paths
    assert "cases[2]" in paths
    assert "cases[3]" in paths


def test_validate_reference_missing_cases():
    errors = schemas.validate_reference({"category": "length"})
    assert [error.path for error in errors] == ["cases"]


@pytest.mark.parametrize(
    "name,expected",
    [("Mass", "weight"), ("fuel-economy", "fuel"), ("Temp", "temperature"), ("length", "length")],
)
def test_normalize_category_name(name, expected):
    assert schemas.normalize_category_name(name) == expected


def test_loader_discovers_tables(table_dir):
    test_loader = loader.TestLoader(str(table_dir))
    tables = test_loader.discover()
    assert [table.table_id for table in tables] == ["length", "wrong"]
    assert tables[0].category == "length"
    assert tables[0].is_valid
    assert test_loader.get_available_tables() == ["length", "wrong"]
    assert test_loader.load_single("missing") is None


def test_loader_flags_unknown_category_and_bad_json(tmp_path):
    directory = tmp_path / "values"
    _write_table(directory, "mystery", {"category": "vibes", "cases": []})
    (directory / "broken_reference.json").write_text("{", encoding="utf-8")

    tables = {table.table_id: table for table in loader.TestLoader(str(directory)).discover()}
    assert not tables["mystery"].is_valid
    assert "Unknown category" in tables["mystery"].errors[0].message
    assert not tables["broken"].is_valid
    assert "Invalid JSON" in tables["broken"].errors[0].message


def test_runner_captures_errors(table_dir):
    table = loader.TestLoader(str(table_dir)).load_single("length")
    result = runner.TestRunner().run_table(table)
    assert result.results[0].actual == 1.609344
    assert result.results[1].success is False
    assert result.results[1].error_type == "UnitNotFoundError"
    assert result.results[0].key == "1 mi->km"


def test_runner_skips_invalid_tables(tmp_path):
    directory = tmp_path / "values"
    _write_table(directory, "bad", {"category": "length"})
    tables = loader.TestLoader(str(directory)).discover()
    assert runner.TestRunner().run_all(tables) == []


def test_comparator_pass_and_fail(table_dir):
    test_loader = loader.TestLoader(str(table_dir))
    test_runner = runner.TestRunner()

    good = comparator.compare_table(test_runner.run_table(test_loader.load_single("length")))
    assert good.overall_pass
    assert good.passed_count == 2
    assert good.max_abs == 0

    bad = comparator.compare_table(test_runner.run_table(test_loader.load_single("wrong")))
    assert not bad.overall_pass
    assert bad.failed_count == 1
    assert bad.max_abs == pytest.approx(1.0)
    assert bad.max_rel == pytest.approx(100.0 / 13)


def test_compare_case_tolerance_override():
    result = runner.CaseResult(index=0, value=1, from_unit="a", to_unit="b", actual=1.001)
    assert not comparator.compare_case(result, {"expected": 1.0}).passed
    assert comparator.compare_case(result, {"expected": 1.0, "tolerance": 0.01}).passed
    assert comparator.compare_case(result, {"expected": 1.0}, table_tolerance=0.01).passed


def test_compare_case_engine_failure_is_a_failure():
    result = runner.CaseResult(index=0, value=1, from_unit="m", to_unit="lb", success=False,
                               error_type="UnitNotFoundError")
    comparison = comparator.compare_case(result, {"expected": 1.0})
    assert not comparison.passed
    assert comparison.rel_error == 100.0


def test_relative_error_of_zero_reference():
    assert comparator.relative_error(0.0, 0.0) == 0.0
    assert comparator.relative_error(1.0, 0.0) == 100.0


def test_reporter_writes_workbook(table_dir, tmp_path):
    test_loader = loader.TestLoader(str(table_dir))
    comparison = comparator.compare_table(runner.TestRunner().run_table(test_loader.load_single("length")))

    report = reporter.VerificationReporter()
    report.add_table_comparison(comparison)
    output = tmp_path / "reports" / "report.xlsx"
    data = report.generate(str(output))

    assert data[:2] == b"PK"
    assert output.read_bytes() == data
    summary = report.summary_frame()
    assert summary.loc[0, "Status"] == "PASS"
    assert list(report.table_frame(comparison)["Status"]) == ["PASS", "PASS"]


def test_markdown_summary_lists_failures(table_dir):
    test_loader = loader.TestLoader(str(table_dir))
    test_runner = runner.TestRunner()
    comparisons = [
        comparator.compare_table(test_runner.run_table(table))
        for table in test_loader.discover()
    ]
    markdown = reporter.generate_markdown_summary(comparisons)
    assert "| length | length | ✅ PASS | 2/2 |" in markdown
    assert "## Failed Cases" in markdown
    assert "`wrong` 1 ft->in: expected 13.0, got 12.0" in markdown
    assert "**Overall:** 1/2 passed" in markdown


def test_create_sample_reference(tmp_path):
    output = tmp_path / "temperature_reference.json"
    sample = loader.create_sample_reference("temp", output)
    assert sample["category"] == "temperature"
    assert [case["to"] for case in sample["cases"]] == ["f", "k", "r"]
    assert schemas.validate_reference(json.loads(output.read_text(encoding="utf-8"))) == []

    with pytest.raises(ValueError):
        loader.create_sample_reference("vibes")


def test_cli_exit_codes(table_dir, tmp_path, capsys):
    output = tmp_path / "out.xlsx"
    args = ["--test-dir", str(table_dir), "--output", str(output)]
    assert verification_main(args + ["--category", "length"]) == 0
    assert output.exists()
    assert verification_main(args + ["--markdown"]) == 1
    assert "RateVault Verification Summary" in capsys.readouterr().out
    assert verification_main(["--test-dir", str(tmp_path / "empty"), "--output", str(output)]) == 1


def test_cli_list_and_create_sample(tmp_path, capsys):
    directory = tmp_path / "values"
    assert verification_main(["--test-dir", str(directory), "--create-sample", "speed"]) == 0
    assert (directory / "speed_reference.json").exists()
    assert verification_main(["--test-dir", str(directory), "--list"]) == 0
    assert "speed" in capsys.readouterr().out
    assert verification_main(["--test-dir", str(directory), "--create-sample", "vibes"]) == 1


def test_shipped_reference_tables_pass(tmp_path):
    comparisons = run_verification(
        test_dir=str(REPO_TEST_VALUES),
        output_path=str(tmp_path / "report.xlsx"),
    )
    assert len(comparisons) == 6
    failures = [
        f"{comparison.table_id}: {case.key}"
        for comparison in comparisons
        for case in comparison.cases
        if not case.passed
    ]
    assert failures == []
