import json

import pytest

from celestialcalc.catalog.loader import (
    filter_by_magnitude,
    load_catalog,
    parse_catalog,
    parse_declination,
    parse_right_ascension,
    parse_star,
)
from celestialcalc.errors import CatalogNotFoundError, CatalogParseError
from celestialcalc.models import ClockTime, EquatorialCoordinates, Frame, Star


@pytest.fixture
def sirius_record():
    return {"RA": "06:45:08.9", "DEC": "-16:42:58", "MAG": "-1.46"}


class TestParsing:
    def test_right_ascension(self):
        assert parse_right_ascension("06:45:08.9") == ClockTime(6, 45, 8.9)
        assert parse_right_ascension("17:43:54") == ClockTime(17, 43, 54)

    def test_declination_positive(self):
        assert parse_declination("+19:10:57") == pytest.approx(
            19 + 10 / 60 + 57 / 3600
        )
        assert parse_declination("38:47:01") == pytest.approx(38 + 47 / 60 + 1 / 3600)

    def test_declination_negative(self):
        assert parse_declination("-16:42:58") == pytest.approx(
            -(16 + 42 / 60 + 58 / 3600)
        )

    def test_declination_sign_applies_below_one_degree(self):
        assert parse_declination("-00:17:57") == pytest.approx(
            -(17 / 60 + 57 / 3600)
        )

    @pytest.mark.parametrize("value", ["6h45m08s", "06:45", "06:xx:08", ""])
    def test_malformed_right_ascension(self, value):
        with pytest.raises(CatalogParseError, match="Malformed RA"):
            parse_right_ascension(value)

    def test_malformed_declination(self):
        with pytest.raises(CatalogParseError, match="Malformed DEC"):
            parse_declination("-16.7")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_declination("north")

    def test_parse_star(self, sirius_record):
        star = parse_star(sirius_record)

        assert star.frame is Frame.EQUATORIAL
        assert star.magnitude == -1.46
        assert star.coordinates.right_ascension == ClockTime(6, 45, 8.9)
        assert star.coordinates.declination == pytest.approx(-16.716111, abs=1e-6)

    def test_parse_star_missing_key(self):
        with pytest.raises(CatalogParseError, match="MAG"):
            parse_star({"RA": "06:45:08.9", "DEC": "-16:42:58"})

    def test_parse_star_bad_magnitude(self, sirius_record):
        sirius_record["MAG"] = "bright"
        with pytest.raises(CatalogParseError, match="MAG"):
            parse_star(sirius_record)


class TestCatalogLoading:
    def test_first_bad_record_fails_whole_catalog(self, sirius_record):
        records = [sirius_record, {"RA": "bad", "DEC": "+00:00:00", "MAG": "1.0"}]

        with pytest.raises(CatalogParseError) as excinfo:
            parse_catalog(records)

        assert excinfo.value.index == 1
        assert excinfo.value.field == "RA"
        assert "record 1" in str(excinfo.value)

    def test_bundled_catalog(self):
        stars = load_catalog()

        assert len(stars) == 35
        assert all(star.frame is Frame.EQUATORIAL for star in stars)
        assert stars[0].magnitude == -1.46

    def test_bundled_catalog_keeps_small_negative_declination(self):
        stars = load_catalog()
        mintaka = next(
            s for s in stars if s.magnitude == 2.23 and s.coordinates.declination < 1
        )
        assert -0.3 < mintaka.coordinates.declination < 0

    def test_load_from_path(self, tmp_path, sirius_record):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([sirius_record, sirius_record]))

        stars = load_catalog(path)

        assert len(stars) == 2
        assert stars[0] == stars[1]

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogNotFoundError, match="not found"):
            load_catalog(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json")
        with pytest.raises(CatalogParseError, match="JSON"):
            load_catalog(str(path))

    def test_json_must_be_a_list(self, tmp_path, sirius_record):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(sirius_record))
        with pytest.raises(CatalogParseError, match="JSON"):
            load_catalog(path)


def test_filter_by_magnitude():
    coords = EquatorialCoordinates(ClockTime(0, 0, 0), 0.0)
    stars = [Star(coords, -1.0), Star(coords, 3.0), Star(coords, 6.5), Star(coords, 7.0)]

    result = filter_by_magnitude(stars, 6.5)

    assert [s.magnitude for s in result] == [-1.0, 3.0, 6.5]
