from datetime import date

import pytest

from crashnet.loader import load_crash_data

HEADER = (
    "crash_number,crash_date,crash_time,total_nonfatal_injuries,"
    "total_fatal_injuries,at_roadway_intersection,x_coordinate,y_coordinate\n"
)
GOOD_ROW = '4923964,01-Jan-2021,2:13 AM,0,0,"HUNTINGTON AVENUE / WAIT STREET",232459.5312,898185.625\n'


def _write(tmp_path, body):
    path = tmp_path / "crash_data.csv"
    path.write_text(body, encoding="utf-8")
    return path


def test_loads_valid_row(tmp_path):
    records = load_crash_data(_write(tmp_path, HEADER + GOOD_ROW))
    assert len(records) == 1
    crash = records[0]
    assert crash.crash_number == "4923964"
    assert crash.crash_date == date(2021, 1, 1)
    assert crash.x_coordinate == 232459.5312
    assert crash.y_coordinate == 898185.625
    assert crash.at_roadway_intersection == "huntington avenue / wait street"


def test_skips_bad_rows(tmp_path):
    body = (
        HEADER
        + GOOD_ROW
        + "2,01-Jan-2021,2:13 AM,0,0,A / B,,898185.625\n"
        + "3,not-a-date,2:13 AM,0,0,A / B,1.0,2.0\n"
        + "4,01-Jan-2021,2:13 AM,abc,0,A / B,1.0,2.0\n"
        + "5,01-Jan-2021,2:13 AM\n"
        + GOOD_ROW.replace("4923964", "6")
    )
    records = load_crash_data(_write(tmp_path, body))
    assert [r.crash_number for r in records] == ["4923964", "6"]


def test_empty_injuries_become_none(tmp_path):
    row = "7,01-Jan-2021,2:13 AM,,,A / B,1.0,2.0\n"
    records = load_crash_data(_write(tmp_path, HEADER + row))
    assert len(records) == 1
    assert records[0].total_fatal_injuries is None
    assert records[0].total_nonfatal_injuries is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_crash_data(tmp_path / "absent.csv")


def test_empty_file_gives_no_records(tmp_path):
    assert load_crash_data(_write(tmp_path, "")) == []