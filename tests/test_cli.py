import json
from pathlib import Path

from typer.testing import CliRunner

from tests.utils import write_sample_text
from text_analyzer.cli import app, parse_top_n

runner = CliRunner()


def test_cli_prints_report_for_file(tmp_path: Path):
    """Running with only a path prints the report with the default top 10."""
    sample = write_sample_text(tmp_path / "sample.txt")
    result = runner.invoke(app, [str(sample)])

    assert result.exit_code == 0
    assert "Top 10 words:" in result.stdout
    assert "Lines:                        2" in result.stdout
    assert " 1. the             4" in result.stdout
    assert " 2. storm           2" in result.stdout


def test_cli_honours_top_n_argument(tmp_path: Path):
    sample = write_sample_text(tmp_path / "letters.txt", "a a a b b c")
    result = runner.invoke(app, [str(sample), "2"])

    assert result.exit_code == 0
    assert "Top 2 words:" in result.stdout
    assert " 2. b               2" in result.stdout
    assert " 3." not in result.stdout


def test_cli_falls_back_to_default_for_invalid_top_n(tmp_path: Path):
    sample = write_sample_text(tmp_path / "letters.txt", "a a a b b c")
    result = runner.invoke(app, [str(sample), "lots"])

    assert result.exit_code == 0
    assert "Top 10 words:" in result.stdout
    assert " 3. c               1" in result.stdout


def test_cli_missing_path_prints_usage_and_fails():
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Usage: text-analyzer <file-path> [top-n]" in result.output


def test_cli_unreadable_file_fails(tmp_path: Path):
    missing = tmp_path / "missing.txt"
    result = runner.invoke(app, [str(missing)])

    assert result.exit_code == 1
    assert f"Could not read file '{missing}'" in result.output
    assert "Text Analyzer" not in result.output


def test_cli_uses_config_defaults(tmp_path: Path):
    sample = write_sample_text(tmp_path / "letters.txt", "a a a b b c")
    config_path = tmp_path / "config.yaml"
    config_path.write_text("top_n: 1\nword_column_width: 4\n", encoding="utf-8")

    result = runner.invoke(app, [str(sample), "--config", str(config_path)])

    assert result.exit_code == 0
    assert "Top 1 words:" in result.stdout
    assert " 1. a    3" in result.stdout


def test_cli_invalid_config_fails(tmp_path: Path):
    sample = write_sample_text(tmp_path / "sample.txt")
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- not\n- a mapping\n", encoding="utf-8")

    result = runner.invoke(app, [str(sample), "-c", str(config_path)])

    assert result.exit_code == 1
    assert "Could not load config" in result.output


def test_cli_writes_json_output(tmp_path: Path):
    sample = write_sample_text(tmp_path / "greeting.txt", "Hello, hello world!")
    json_path = tmp_path / "out" / "report.json"

    result = runner.invoke(
        app, [str(sample), "1", "--json-output", str(json_path)]
    )

    assert result.exit_code == 0
    payload = json.loads(json_path.read_text(encoding="utf-8"))
    assert payload["file"] == str(sample)
    assert payload["summary"]["words"] == 3
    assert payload["top_words"] == [{"rank": 1, "word": "hello", "count": 2}]


def test_parse_top_n():
    assert parse_top_n(None, default=10) == 10
    assert parse_top_n("3", default=10) == 3
    assert parse_top_n("0", default=10) == 0
    assert parse_top_n("+4", default=10) == 4
    assert parse_top_n("-1", default=10) == 10
    assert parse_top_n("2.5", default=10) == 10
    assert parse_top_n("", default=7) == 7


def test_cli_negative_top_n_falls_back_to_default(tmp_path: Path):
    sample = write_sample_text(tmp_path / "letters.txt", "a a a b b c")
    result = runner.invoke(app, [str(sample), "-5"])

    assert result.exit_code == 0
    assert "Top 10 words:" in result.stdout
    assert " 3. c               1" in result.stdout


def test_cli_ignores_extra_arguments(tmp_path: Path):
    sample = write_sample_text(tmp_path / "letters.txt", "a a a b b c")
    result = runner.invoke(app, [str(sample), "2", "extra", "more"])

    assert result.exit_code == 0
    assert "Top 2 words:" in result.stdout


def test_cli_config_with_wrong_type_fails(tmp_path: Path):
    sample = write_sample_text(tmp_path / "sample.txt")
    config_path = tmp_path / "config.yaml"
    config_path.write_text('top_n: "x"\n', encoding="utf-8")

    result = runner.invoke(app, [str(sample), "--config", str(config_path)])

    assert result.exit_code == 1
    assert "top_n must be a non-negative integer" in result.output


def test_parse_top_n_rejects_values_past_64_bits():
    assert parse_top_n(str(2**64 - 1), default=10) == 2**64 - 1
    assert parse_top_n(str(2**64), default=10) == 10
    assert parse_top_n("99999999999999999999999", default=10) == 10
