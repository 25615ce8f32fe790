"""Tests for the mosci command line entry point."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from mosci.estimator.main import app

runner = CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the command inside an empty directory without a config file."""
    monkeypatch.chdir(tmp_path)
    for name in ("MOSCI_LOG_PATH", "MOSCI_CONFIG_PATH"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def ratings_csv(workdir: Path) -> Path:
    path = workdir / "ratings.csv"
    path.write_text("condition,s1,s2,s3,s4\nref,5,4,5,5\nlow,1,2,1,2\n")
    return path


class TestMain:
    def test_estimates_from_csv(self, ratings_csv: Path, workdir: Path) -> None:
        json_out = workdir / "report.json"
        result = runner.invoke(
            app,
            [str(ratings_csv), "--seed", "1", "--iterations", "200", "--json-out", str(json_out)],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(json_out.read_text())
        assert data["mos"] == pytest.approx([4.75, 1.5])
        assert data["seed"] == 1
        assert data["bootstrap_iterations"] == 200

    def test_writes_csv(self, ratings_csv: Path, workdir: Path) -> None:
        csv_out = workdir / "out" / "report.csv"
        result = runner.invoke(
            app, [str(ratings_csv), "--seed", "1", "--iterations", "200", "--csv-out", str(csv_out)]
        )

        assert result.exit_code == 0, result.output
        lines = csv_out.read_text().splitlines()
        assert lines[1].startswith("ref,")
        assert lines[2].startswith("low,")

    def test_numbered_subject_header(self, workdir: Path) -> None:
        path = workdir / "numbered.csv"
        path.write_text("condition,1,2,3,4\nref,5,4,5,5\nlow,1,2,1,2\n")
        json_out = workdir / "report.json"
        result = runner.invoke(
            app, [str(path), "--seed", "1", "--iterations", "100", "--json-out", str(json_out)]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(json_out.read_text())
        assert data["mos"] == pytest.approx([4.75, 1.5])

    def test_no_header_keeps_first_row(self, workdir: Path) -> None:
        path = workdir / "labelled.csv"
        path.write_text("ref,5,4,5,5\nlow,1,2,1,2\n")
        json_out = workdir / "report.json"
        result = runner.invoke(
            app,
            [str(path), "--no-header", "--iterations", "100", "--json-out", str(json_out)],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(json_out.read_text())
        assert data["mos"] == pytest.approx([4.75, 1.5])

    def test_demo_data_without_csv(self, workdir: Path) -> None:
        json_out = workdir / "demo.json"
        result = runner.invoke(
            app,
            [
                "--seed",
                "3",
                "--iterations",
                "100",
                "--demo-conditions",
                "6",
                "--demo-subjects",
                "10",
                "--json-out",
                str(json_out),
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(json_out.read_text())
        assert len(data["mos"]) == 6
        assert data["num_subjects"] == 10

    def test_alpha_option(self, ratings_csv: Path, workdir: Path) -> None:
        json_out = workdir / "report.json"
        result = runner.invoke(
            app,
            [
                str(ratings_csv),
                "--alpha",
                "0.1",
                "--iterations",
                "200",
                "--json-out",
                str(json_out),
            ],
        )

        assert result.exit_code == 0, result.output
        assert json.loads(json_out.read_text())["alpha"] == 0.1

    def test_config_file(self, ratings_csv: Path, workdir: Path) -> None:
        config = workdir / "config.yaml"
        config.write_text("estimator:\n  alpha: 0.01\n  bootstrap_iterations: 150\n  seed: 4\n")
        json_out = workdir / "report.json"
        result = runner.invoke(
            app, [str(ratings_csv), "--config", str(config), "--json-out", str(json_out)]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(json_out.read_text())
        assert data["alpha"] == 0.01
        assert data["bootstrap_iterations"] == 150
        assert data["seed"] == 4

    def test_options_override_config_file(self, ratings_csv: Path, workdir: Path) -> None:
        config = workdir / "config.yaml"
        config.write_text("estimator:\n  alpha: 0.01\n  bootstrap_iterations: 150\n")
        json_out = workdir / "report.json"
        result = runner.invoke(
            app,
            [
                str(ratings_csv),
                "--config",
                str(config),
                "--alpha",
                "0.2",
                "--json-out",
                str(json_out),
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(json_out.read_text())
        assert data["alpha"] == 0.2
        assert data["bootstrap_iterations"] == 150

    def test_writes_run_log(self, ratings_csv: Path, workdir: Path) -> None:
        result = runner.invoke(app, [str(ratings_csv), "--seed", "1", "--iterations", "100"])

        assert result.exit_code == 0, result.output
        log_file = workdir / "data" / "logs" / "mosci.jsonl"
        entries = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert {entry["message"] for entry in entries} >= {
            "Estimation started",
            "Estimation completed",
            "Report produced",
        }
        assert len({entry["run_id"] for entry in entries}) == 1


class TestMainErrors:
    def test_invalid_alpha(self, ratings_csv: Path) -> None:
        result = runner.invoke(app, [str(ratings_csv), "--alpha", "1.5"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_missing_ratings_file(self, workdir: Path) -> None:
        result = runner.invoke(app, [str(workdir / "missing.csv")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_rating_outside_scale(self, workdir: Path) -> None:
        path = workdir / "bad.csv"
        path.write_text("1,2,3\n4,7,5\n")
        result = runner.invoke(app, [str(path), "--iterations", "100"])
        assert result.exit_code == 1
        assert "outside" in result.output

    def test_single_subject(self, workdir: Path) -> None:
        path = workdir / "single.csv"
        path.write_text("3\n4\n")
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 1

    def test_malformed_config(self, ratings_csv: Path, workdir: Path) -> None:
        config = workdir / "config.yaml"
        config.write_text("estimator: [unclosed\n")
        result = runner.invoke(app, [str(ratings_csv), "--config", str(config)])
        assert result.exit_code == 1

    def test_non_utf8_ratings_file(self, workdir: Path) -> None:
        path = workdir / "binary.csv"
        path.write_bytes(b"\xff\xfe1,2\n3,4\n")
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 1
        assert "Unreadable" in result.output
