"""Tests for the CLI reporter and commands."""

from __future__ import annotations

import json
import logging

import pytest
from rich.logging import RichHandler
from typer.testing import CliRunner

from html_grader.config.loader import clear_cache
from html_grader.domain.models import Check, CheckResult, Report
from html_grader.presentation.cli.app import app
from html_grader.presentation.cli.formatters import format_result_line, format_summary

runner = CliRunner()

_CHECK = Check("Lists (ordered and unordered)", 10, lambda d: True)


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture()
def root_logger():
    """Root logger, with its handlers and level restored afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# Line formatting
# ---------------------------------------------------------------------------


class TestFormatting:
    def test_passed_line(self):
        line = format_result_line(CheckResult.passing(_CHECK))
        assert line == "✅ Lists (ordered and unordered) (10 points)"

    def test_failed_line(self):
        line = format_result_line(CheckResult.failing(_CHECK))
        assert line == "❌ Lists (ordered and unordered) (0 points)"

    def test_errored_line(self):
        line = format_result_line(CheckResult.errored(_CHECK, "TypeError: boom"))
        assert line == "❌ Lists (ordered and unordered) - Error: TypeError: boom (0 points)"

    def test_errored_line_without_details(self):
        result = CheckResult.errored(_CHECK, "TypeError: boom")
        assert format_result_line(result, show_error_details=False) == (
            "❌ Lists (ordered and unordered) (0 points)"
        )

    def test_summary(self):
        assert format_summary(Report((), 85, 100)) == "📊 Final Score: 85/100 (85%)"

    @pytest.mark.parametrize(
        ("awarded", "possible", "expected"),
        [(2, 3, 67), (1, 8, 13), (1, 3, 33), (0, 0, 0)],
    )
    def test_percentage_rounds_half_up(self, awarded, possible, expected):
        assert Report((), awarded, possible).rounded_percentage == expected


# ---------------------------------------------------------------------------
# html-grader grade
# ---------------------------------------------------------------------------


class TestGradeCommand:
    def test_perfect_submission_exits_zero(self, submission_dir):
        result = runner.invoke(app, ["grade", str(submission_dir)])
        assert result.exit_code == 0
        assert "✅ HTML file exists (5 points)" in result.stdout
        assert "📊 Final Score: 100/100 (100%)" in result.stdout

    def test_imperfect_submission_exits_one(self, tmp_path, three_images_html):
        (tmp_path / "index.html").write_text(three_images_html, encoding="utf-8")
        result = runner.invoke(app, ["grade", str(tmp_path)])
        assert result.exit_code == 1
        assert "❌ Images with proper attributes (0 points)" in result.stdout
        assert "📊 Final Score: 85/100 (85%)" in result.stdout

    def test_every_check_is_listed(self, tmp_path):
        (tmp_path / "index.html").write_text("<p>hello</p>", encoding="utf-8")
        result = runner.invoke(app, ["grade", str(tmp_path)])
        assert result.exit_code == 1
        assert result.stdout.count("points)") == 8
        assert "5/100 (5%)" in result.stdout

    def test_missing_submission(self, tmp_path):
        result = runner.invoke(app, ["grade", str(tmp_path)])
        assert result.exit_code == 1
        assert "No HTML file found!" in result.stdout
        assert "Final Score" not in result.stdout

    def test_json_output(self, submission_dir):
        result = runner.invoke(app, ["grade", str(submission_dir), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["total_awarded"] == 100
        assert data["perfect"] is True
        assert len(data["results"]) == 8
        assert data["results"][0]["outcome"] == "passed"
        assert (data["passed"], data["failed"], data["errored"]) == (8, 0, 0)

    def test_verbose_logs_to_stderr(self, submission_dir, root_logger):
        result = runner.invoke(app, ["grade", str(submission_dir), "--verbose"])
        assert result.exit_code == 0
        assert root_logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in root_logger.handlers)
        assert "Score 100/100" in result.output

    def test_quiet_by_default(self, submission_dir, root_logger):
        result = runner.invoke(app, ["grade", str(submission_dir)])
        assert result.exit_code == 0
        assert root_logger.level == logging.WARNING
        assert "Score 100/100" not in result.output

    def test_invalid_config(self, submission_dir):
        cfg = submission_dir / "grader.json"
        cfg.write_text('{"candidate_filenames": []}', encoding="utf-8")
        result = runner.invoke(app, ["grade", str(submission_dir), "--config", str(cfg)])
        assert result.exit_code == 1
        assert "candidate_filenames" in result.stdout


# ---------------------------------------------------------------------------
# Other commands
# ---------------------------------------------------------------------------


class TestOtherCommands:
    def test_rubric(self):
        result = runner.invoke(app, ["rubric"])
        assert result.exit_code == 0
        assert "Semantic HTML elements" in result.stdout
        assert "100" in result.stdout

    def test_config_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "candidate_filenames" in result.stdout

    def test_config_init_and_validate(self, tmp_path):
        dest = tmp_path / "my_config.json"
        result = runner.invoke(app, ["config", "init", "--output", str(dest)])
        assert result.exit_code == 0
        assert dest.exists()

        result = runner.invoke(app, ["config", "validate", str(dest)])
        assert result.exit_code == 0
        assert "Valid configuration" in result.stdout

    def test_config_validate_missing_file(self, tmp_path):
        result = runner.invoke(app, ["config", "validate", str(tmp_path / "none.json")])
        assert result.exit_code == 1
