"""Tests for the lookup_telescope command line script."""

import json

import pytest

from lookup_telescope import format_limits, main
from telescope_lookup.core.telescope import get_telescope


class TestTextOutput:
    """Test the default text output."""

    def test_known_telescope(self, capsys):
        assert main(["JCMT"]) == 0
        out = capsys.readouterr().out
        assert "=== JCMT ===" in out
        assert "JCMT 15 metre" in out
        assert "19 49 22.11" in out
        assert "568" in out

    def test_separator(self, capsys):
        assert main(["--sep", ":", "JCMT"]) == 0
        assert "19:49:22.11" in capsys.readouterr().out

    def test_unknown_telescope(self, capsys):
        assert main(["JCMT", "blah"]) == 1
        out = capsys.readouterr().out
        assert "JCMT 15 metre" in out
        assert "BLAH" not in out

    def test_list(self, capsys):
        assert main(["--list"]) == 0
        names = capsys.readouterr().out.split()
        assert names == sorted(names)
        assert "UKIRT" in names

    def test_no_identifiers(self):
        with pytest.raises(SystemExit):
            main([])


class TestCodes:
    """Test lookups restricted to the MPC table."""

    def test_code(self, capsys):
        assert main(["--code", "011"]) == 0
        assert "Wetzikon" in capsys.readouterr().out

    def test_mnemonic_is_not_a_code(self):
        assert main(["--code", "JCMT"]) == 1

    def test_custom_table(self, capsys, tmp_path):
        path = tmp_path / "custom.dat"
        path.write_text("Code  Long.   cos      sin    Name\n"
                        "Z99  10.0000 0.70000 +0.71000 Test Observatory\n",
                        encoding="utf-8")
        assert main(["--mpc-table", str(path), "Z99"]) == 0
        assert "Test Observatory" in capsys.readouterr().out


class TestJsonOutput:
    """Test machine readable output."""

    def test_telescope(self, capsys):
        assert main(["--format", "json", "UKIRT"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 1
        assert data[0]['name'] == "UKIRT"
        assert data[0]['limits']['type'] == "HADEC"
        assert data[0]['geoc_lat'] == pytest.approx(0.343830843, abs=1e-8)

    def test_list(self, capsys):
        assert main(["--format", "json", "--list"]) == 0
        assert "JCMT" in json.loads(capsys.readouterr().out)


def test_format_limits():
    assert format_limits(get_telescope("JCMT")) == "AZEL el [5.00, 88.00] deg"
