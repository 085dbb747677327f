"""Tests for the command line interface."""

from __future__ import annotations

import json

import pytest
from conftest import make_record
from typer.testing import CliRunner

from printfleet import __version__
from printfleet.cli import app
from printfleet.config import DatabaseConfig, Settings, get_settings, write_settings
from printfleet.storage import Database

runner = CliRunner()

CSV_CONTENT = """name,model,ip,access_code,serial
Workshop,X1C,192.168.1.20,11112222,01S00A111
Garage,P1S,192.168.1.21,33334444,01P00B222
"""


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    data = tmp_path / "data"
    config_path = tmp_path / "config.toml"
    write_settings(Settings(database=DatabaseConfig(path=str(data))), config_path)
    monkeypatch.setenv("PRINTFLEET_CONFIG", str(config_path))
    get_settings.cache_clear()
    return data


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"printfleet version {__version__}" in result.stdout


def test_config_show(data_dir):
    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0
    assert "[imports]" in result.stdout


def test_log_level_option(data_dir):
    result = runner.invoke(app, ["--log-level", "debug", "config", "show"])
    assert result.exit_code == 0
    assert "[database]" in result.stdout


def test_import_then_list(data_dir, tmp_path):
    source = tmp_path / "fleet.csv"
    source.write_text(CSV_CONTENT)

    result = runner.invoke(app, ["import", str(source)])
    assert result.exit_code == 0, result.stdout
    assert "Imported 2 printer(s)" in result.stdout

    printers = Database(data_dir).load_printers().printers
    assert sorted(printers) == ["01P00B222", "01S00A111"]

    listing = runner.invoke(app, ["list"])
    assert listing.exit_code == 0
    assert "Workshop" in listing.stdout
    assert "11112222" not in listing.stdout


def test_import_skips_registered_serials(data_dir, tmp_path):
    Database(data_dir).add_printer(make_record("01S00A111", name="Existing"))
    source = tmp_path / "fleet.csv"
    source.write_text(CSV_CONTENT)

    result = runner.invoke(app, ["import", str(source)])
    assert result.exit_code == 0
    assert "Skipped 1" in result.stdout
    assert Database(data_dir).load_printers().printers["01S00A111"].name == "Existing"


def test_import_overwrite(data_dir, tmp_path):
    Database(data_dir).add_printer(make_record("01S00A111", name="Existing"))
    source = tmp_path / "fleet.csv"
    source.write_text(CSV_CONTENT)

    result = runner.invoke(app, ["import", str(source), "--on-duplicate", "overwrite"])
    assert result.exit_code == 0
    assert Database(data_dir).load_printers().printers["01S00A111"].name == "Workshop"


def test_import_validate_only(data_dir, tmp_path):
    source = tmp_path / "fleet.csv"
    source.write_text(CSV_CONTENT)

    result = runner.invoke(app, ["import", str(source), "--validate-only"])
    assert result.exit_code == 0
    assert "2 printer(s) would be imported" in result.stdout
    assert Database(data_dir).load_printers().printers == {}


def test_import_invalid_file_fails(data_dir, tmp_path):
    source = tmp_path / "fleet.csv"
    source.write_text("name,model\nA,B\n")

    result = runner.invoke(app, ["import", str(source)])
    assert result.exit_code == 1
    assert "Missing required CSV columns" in result.stdout


def test_preview(data_dir, tmp_path):
    Database(data_dir).add_printer(make_record("01P00B222", name="Garage"))
    source = tmp_path / "fleet.csv"
    source.write_text(CSV_CONTENT)

    result = runner.invoke(app, ["preview", str(source)])
    assert result.exit_code == 0
    assert "Format: csv" in result.stdout
    assert "Already registered: 01P00B222" in result.stdout
    assert len(Database(data_dir).load_printers().printers) == 1


def test_export_to_stdout(data_dir):
    Database(data_dir).add_printer(make_record("01S00A111", name="Workshop"))

    result = runner.invoke(app, ["export", "--format", "json", "--output", "-"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["serial"] == "01S00A111"


def test_export_to_directory(data_dir, tmp_path):
    Database(data_dir).add_printer(make_record("01S00A111", name="Workshop"))
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    result = runner.invoke(app, ["export", "-f", "txt", "-o", str(out_dir)])
    assert result.exit_code == 0
    written = list(out_dir.glob("printers-*.txt"))
    assert len(written) == 1
    assert "serial: 01S00A111" in written[0].read_text()


def test_export_writes_utf8(data_dir, tmp_path):
    Database(data_dir).add_printer(make_record("01S00A111", name="Atelier é"))
    target = tmp_path / "fleet.txt"

    result = runner.invoke(app, ["export", "-f", "txt", "-o", str(target)])
    assert result.exit_code == 0
    assert "name: Atelier é" in target.read_text(encoding="utf-8")


def test_export_to_missing_directory_fails_cleanly(data_dir, tmp_path):
    Database(data_dir).add_printer(make_record("01S00A111", name="Workshop"))
    target = tmp_path / "missing" / "fleet.json"

    result = runner.invoke(app, ["export", "-o", str(target)])
    assert result.exit_code == 1
    assert "Could not write" in result.output
    assert not isinstance(result.exception, OSError)


def test_add_rejects_bad_ip(data_dir):
    result = runner.invoke(app, ["add", "Lab", "A1", "300.0.0.1", "1234", "SER9"])
    assert result.exit_code == 1
    assert "Invalid IP address format" in result.stdout


def test_add_and_remove(data_dir):
    result = runner.invoke(app, ["add", "Lab", "A1", "10.0.0.8", "1234", "SER9"])
    assert result.exit_code == 0

    removed = runner.invoke(app, ["remove", "SER9"])
    assert removed.exit_code == 0
    missing = runner.invoke(app, ["remove", "SER9"])
    assert missing.exit_code == 1

