"""Tests for the command-line booking document check."""

import json

from rental_booking.cli import main
from tests.conftest import make_booking


def _write(tmp_path, document):
    path = tmp_path / "booking.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


class TestMain:
    def test_valid_booking_prints_payload(self, tmp_path, capsys):
        assert main([_write(tmp_path, make_booking())]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["special_instructions"] == ""
        assert payload["payment_method"]["type"] == "gcash"

    def test_invalid_booking_prints_errors(self, tmp_path, capsys):
        assert main([_write(tmp_path, make_booking(costume_id=""))]) == 1
        assert "costume_id: Costume ID is required" in capsys.readouterr().out

    def test_partial_flag(self, tmp_path, capsys):
        path = _write(tmp_path, {"schedule": {"start_date": "2024-01-01"}})
        assert main([path]) == 1
        capsys.readouterr()
        assert main([path, "--partial"]) == 0
        assert json.loads(capsys.readouterr().out) == {"schedule": {"start_date": "2024-01-01"}}

    def test_step_flag(self, tmp_path, capsys):
        path = _write(tmp_path, make_booking(agreements={"terms_accepted": False}))
        assert main([path, "--step", "schedule"]) == 0
        capsys.readouterr()
        assert main([path, "--step", "summary"]) == 1
        assert "agreements.terms_accepted" in capsys.readouterr().out

    def test_non_object_document(self, tmp_path, capsys):
        assert main([_write(tmp_path, ["not", "a", "booking"])]) == 1
        assert capsys.readouterr().out.startswith("<root>:")

    def test_unreadable_file(self, tmp_path):
        assert main([str(tmp_path / "missing.json")]) == 2

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert main([str(path)]) == 2
