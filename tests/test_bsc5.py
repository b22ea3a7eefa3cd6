import json
import logging

import pytest

from skyseeker.angles import angle_format_to_radians, arc_seconds_to_radians, time_format_to_radians
from skyseeker.bsc5 import Bsc5Entry, Bsc5Note, main, parse
from skyseeker.codec import decode


def _record(**overrides):
    record = {
        "HR": "1",
        "Name": "Test Star",
        "Constellation": "And",
        "Notes": [{"Category": "C", "Remark": "a remark"}],
        "RAh": "00",
        "RAm": "05",
        "RAs": "09.9",
        "DE-": "+",
        "DEd": "45",
        "DEm": "13",
        "DEs": "45",
        "Vmag": "6.70",
        "pmRA": "-0.012",
        "pmDE": "-0.018",
        "RadVel": "-18",
        "Parallax": None,
        "B-V": "0.07",
    }
    for key, value in overrides.items():
        if value is ...:
            record.pop(key, None)
        else:
            record[key] = value
    return record


def test_entry_from_aliases():
    entry = Bsc5Entry.from_mapping(_record())
    assert entry.hr == "1"
    assert entry.declination_sign == "+"
    assert entry.parallax is None
    assert entry.notes == [Bsc5Note("C", "a remark")]


def test_entry_from_field_names():
    data = {name: value for name, value in _record().items()}
    data["hr"] = data.pop("HR")
    entry = Bsc5Entry.from_mapping(data)
    assert entry.hr == "1"


def test_entry_missing_required_field():
    with pytest.raises(ValueError, match="visual_magnitude"):
        Bsc5Entry.from_mapping(_record(Vmag=...))


def test_entry_notes_default_empty():
    entry = Bsc5Entry.from_mapping(_record(Notes=...))
    assert entry.notes == []


def test_to_star_values():
    star = Bsc5Entry.from_mapping(_record()).to_star()
    assert star.id == "HR 1"
    assert star.hr == 1
    assert star.name == "Test Star"
    assert star.constellation == "And"
    assert star.notes == (("C", "a remark"),)
    assert star.right_ascension == time_format_to_radians(" ", 0, 5, 9.9)
    assert star.declination == angle_format_to_radians("+", 45, 13, 45.0)
    assert star.proper_motion_right_ascension == arc_seconds_to_radians(-0.012)
    assert star.proper_motion_declination == arc_seconds_to_radians(-0.018)
    assert star.parallax == 0.001
    assert star.radial_velocity == -18.0
    assert star.visual_magnitude == 6.70
    assert star.b_v_color == 0.07


def test_to_star_negative_declination():
    star = Bsc5Entry.from_mapping(_record(**{"DE-": "-"})).to_star()
    assert star.declination == -angle_format_to_radians("+", 45, 13, 45.0)


def test_to_star_missing_radial_velocity():
    entry = Bsc5Entry.from_mapping(_record(RadVel=...))
    with pytest.raises(ValueError, match="missing radial velocity"):
        entry.to_star()


def test_to_star_hr_out_of_range():
    entry = Bsc5Entry.from_mapping(_record(HR="70000"))
    with pytest.raises(ValueError, match="failed to parse HR"):
        entry.to_star()


def test_to_star_bad_declination_minutes():
    entry = Bsc5Entry.from_mapping(_record(DEm="75"))
    with pytest.raises(ValueError, match="failed to parse declination"):
        entry.to_star()


def test_parse_skips_bad_entries(caplog):
    data = json.dumps([_record(), _record(HR="2", RadVel=...), _record(HR="3", Vmag="bright")])
    with caplog.at_level(logging.WARNING):
        bodies = parse(data)
    assert [body.id for body in bodies] == ["HR 1"]
    assert "Skipping entry 'HR = 2' in BSC5: missing radial velocity" in caplog.text
    assert "failed to parse visual magnitude" in caplog.text


def test_parse_rejects_invalid_document():
    with pytest.raises(ValueError, match="Failed to deserialize BSC5 data"):
        parse("{not json")


def test_parse_rejects_non_list():
    with pytest.raises(ValueError, match="Failed to deserialize BSC5 data"):
        parse(json.dumps(_record()))


def test_main_writes_encoded_stars(tmp_path):
    source = tmp_path / "bsc5-all.json"
    source.write_text(json.dumps([_record(), _record(HR="7")]), encoding="utf-8")
    assert main(["--data-dir", str(tmp_path)]) == 0
    bodies = decode((tmp_path / "bsc5-stars.bin").read_bytes())
    assert [body.id for body in bodies] == ["HR 1", "HR 7"]
    assert all(body.is_star for body in bodies)