# tests/test_cli.py

import pytest

from ethiocal.cli import main


def test_to_gregorian(capsys):
    assert main(["to-gregorian", "2017-04-16"]) == 0
    assert capsys.readouterr().out.strip() == "2024-12-25"


def test_to_gregorian_with_era(capsys):
    assert main(["to-gregorian", "5500-01-01", "--era", "alem"]) == 0
    assert capsys.readouterr().out.strip() == "7-08-28"


def test_to_ethiopic(capsys):
    assert main(["to-ethiopic", "2008/9/10"]) == 0
    assert capsys.readouterr().out.strip() == "2000-13-05"


def test_jdn_and_back(capsys):
    assert main(["jdn", "gregorian", "2000-01-01"]) == 0
    assert capsys.readouterr().out.strip() == "2451545"
    assert main(["from-jdn", "2451545", "ethiopic"]) == 0
    assert capsys.readouterr().out.strip() == "1992-04-22"
    assert main(["from-jdn", "2451545", "gregorian"]) == 0
    assert capsys.readouterr().out.strip() == "2000-01-01"


def test_weekday(capsys):
    assert main(["weekday", "2460670"]) == 0
    assert capsys.readouterr().out.strip() == "2 Wednesday"


def test_validate_exit_status(capsys):
    assert main(["validate", "ethiopic", "2015-13-06"]) == 0
    assert main(["validate", "ethiopic", "2017-13-06"]) == 1
    assert main(["validate", "gregorian", "2023-02-29"]) == 1
    out = capsys.readouterr().out.split()
    assert out == ["valid", "invalid", "invalid"]


def test_invalid_date_reports_error(capsys):
    assert main(["to-ethiopic", "2023-02-29"]) == 2
    err = capsys.readouterr().err
    assert "error:" in err and "Gregorian" in err


def test_unparseable_date(capsys):
    assert main(["to-ethiopic", "yesterday"]) == 2
    assert "error:" in capsys.readouterr().err


def test_today(capsys):
    assert main(["today"]) == 0
    out = capsys.readouterr().out
    assert "Gregorian:" in out and "Ethiopian:" in out


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "300", "--seed", "1"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_unknown_command():
    with pytest.raises(SystemExit):
        main(["nope"])
