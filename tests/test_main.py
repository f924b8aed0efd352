"""Tests for the command line entry point."""

import json
from pathlib import Path

import pytest

from cabin_buddy.main import main

FIXTURES_DIR = Path(__file__).parent / "fixtures"
BILLING_DIR = FIXTURES_DIR / "billing"
SELECTION_DIR = FIXTURES_DIR / "selection"


def run_cli(capsys, *argv):
    exit_code = main(list(argv))
    return exit_code, json.loads(capsys.readouterr().out)


class TestQuoteCommand:
    """Tests for the quote subcommand."""

    def test_quote_prints_breakdown(self, capsys):
        """Test a full-fee quote."""
        exit_code, output = run_cli(
            capsys,
            "quote",
            "--config", str(BILLING_DIR / "config_full_fees.json"),
            "--stay", str(BILLING_DIR / "stay_summer_week.json"),
        )

        assert exit_code == 0
        assert output["success"] is True
        assert output["breakdown"]["total"] == 343
        assert output["breakdown"]["formatted_total"] == "$343.00"

    def test_quote_error_exits_nonzero(self, capsys, tmp_path, captured_logs):
        """Test that a calculation error is reported as JSON and logged."""
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"method": "per-room", "amount": 10}))

        exit_code, output = run_cli(
            capsys,
            "quote",
            "--config", str(config),
            "--stay", str(BILLING_DIR / "stay_summer_week.json"),
        )

        assert exit_code == 1
        assert output == {"success": False, "error": "Unknown billing method: per-room"}
        assert any(log["event"] == "Command failed" for log in captured_logs)


class TestValidateCommand:
    """Tests for the validate subcommand."""

    def test_valid_config(self, capsys):
        """Test a valid config exits 0."""
        exit_code, output = run_cli(
            capsys, "validate", "--config", str(BILLING_DIR / "config_seasonal.json")
        )

        assert exit_code == 0
        assert output["is_valid"] is True

    def test_invalid_config(self, capsys, tmp_path):
        """Test an invalid config exits 1 and lists errors."""
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"amount": 0}))

        exit_code, output = run_cli(capsys, "validate", "--config", str(config))

        assert exit_code == 1
        assert output["errors"] == [
            "Billing method is required",
            "Billing amount must be greater than 0",
        ]


class TestPeriodsCommand:
    """Tests for the periods subcommand."""

    def test_upcoming_with_active_group(self, capsys):
        """Test that --upcoming hides completed windows."""
        exit_code, output = run_cli(
            capsys,
            "periods",
            "--periods", str(SELECTION_DIR / "reservation_periods.json"),
            "--active", "Chens",
            "--upcoming",
        )

        assert exit_code == 0
        assert [p["family_group"] for p in output["periods"]] == ["Chens"]
        assert output["periods"][0]["status"] == "active"


class TestRotationCommand:
    """Tests for the rotation subcommand."""

    def test_generates_periods(self, capsys):
        """Test window generation with settings defaults."""
        exit_code, output = run_cli(
            capsys,
            "rotation",
            "--order", "Andersons, Bakers",
            "--base-year", "2026",
            "--selection-year", "2025",
            "--organization", "org-lakehouse",
        )

        assert exit_code == 0
        assert [p["current_family_group"] for p in output["periods"]] == [
            "Andersons",
            "Bakers",
        ]
        assert output["periods"][0]["selection_start_date"] == "2025-10-01"


def test_missing_command_exits():
    """Test that argparse rejects a missing subcommand."""
    with pytest.raises(SystemExit):
        main([])
