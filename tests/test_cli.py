"""Tests for the efmodel CLI."""

import json
from pathlib import Path

import tyro
from conftest import CONTEXT_CS, write_model

from efmodel.cli import main


class TestParseCommand:
    def test_json_output(self, model_dir: Path, capsys):
        rc = main(["parse", "--directory", str(model_dir), "--json"])
        assert rc == 0
        data = json.loads(capsys.readouterr().out)
        assert data["namespace"] == "Inventory.Data"
        assert [o["class_name"] for o in data["objects"]] == [
            "Device",
            "DeviceGroup",
        ]
        group = data["objects"][1]
        assert group["dependants"] == [
            {
                "dependant": "Device",
                "foreign_key": "DeviceGroup_id",
                "getter": "Devices",
            }
        ]

    def test_text_output(self, model_dir: Path, capsys):
        rc = main(["parse", "--directory", str(model_dir)])
        assert rc == 0
        out = capsys.readouterr().out
        assert "[Model]" in out
        assert "Namespace: Inventory.Data" in out
        # attributes are printed verbatim, not eaten as markup
        assert "[Key]" in out

    def test_missing_directory(self, tmp_path: Path, capsys):
        rc = main(["parse", "--directory", str(tmp_path / "missing")])
        assert rc == 1
        assert "doesn't exist" in capsys.readouterr().err


class TestValidateCommand:
    def test_valid(self, model_dir: Path, capsys):
        rc = main(["validate", "--directory", str(model_dir)])
        assert rc == 0
        out = capsys.readouterr().out
        assert "model is valid" in out
        assert "dependants: 2" in out

    def test_duplicate_context(self, model_dir: Path, capsys):
        write_model(model_dir, {"Other.cs": CONTEXT_CS})
        rc = main(["validate", "--directory", str(model_dir)])
        assert rc == 1
        assert "multiple DbContext" in capsys.readouterr().err


class TestTablesCommand:
    def test_lists_tables(self, model_dir: Path, capsys):
        rc = main(["tables", "--directory", str(model_dir)])
        assert rc == 0
        out = capsys.readouterr().out
        assert "Inventory.Data (2 tables)" in out
        assert "-> Device.DeviceGroup_id via Devices" in out
        assert "-> Device.parent_Device_id via Devices" in out


def test_unknown_command():
    assert main(["frobnicate"]) != 0


def test_help_exits_cleanly():
    assert main(["--help"]) == 0


def test_bare_system_exit_is_success(monkeypatch):
    def exit_without_code(*args, **kwargs):
        raise SystemExit()

    monkeypatch.setattr(tyro, "cli", exit_without_code)
    assert main(["parse"]) == 0


def test_system_exit_message_is_failure(monkeypatch):
    def exit_with_message(*args, **kwargs):
        raise SystemExit("bad arguments")

    monkeypatch.setattr(tyro, "cli", exit_with_message)
    assert main(["parse"]) == 1
