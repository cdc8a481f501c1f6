from unittest.mock import patch

import pytest

from geo_constants.domain.exceptions import ReferenceDataUnavailableError
from geo_constants.infrastructure.reference.dataset import (
    CONTINENTS,
    PackagedReferenceDataset,
    calling_code,
)


@pytest.fixture(scope="module")
def reference():
    return PackagedReferenceDataset().load()


def test_continents(reference):
    assert reference.continents["AF"] == "Africa"
    assert len(reference.continents) == 7


def test_tanzania_record(reference):
    tanzania = reference.countries["TZ"]
    assert "Tanzania" in tanzania.name
    assert tanzania.phone == "255"


def test_country_codes_are_alpha_2(reference):
    assert all(len(code) == 2 for code in reference.countries)


def test_timezones(reference):
    assert "Africa/Dar_es_Salaam" in reference.timezones
    assert list(reference.timezones) == sorted(reference.timezones)


def test_tables_are_read_only(reference):
    with pytest.raises(TypeError):
        reference.countries["XX"] = None
    with pytest.raises(TypeError):
        CONTINENTS["XX"] = "Atlantis"


def test_load_is_cached():
    dataset = PackagedReferenceDataset()
    assert dataset.load() is dataset.load()


def test_calling_code_unknown_region():
    assert calling_code("XX") == ""


def test_load_failure_is_reported():
    with patch(
        "zoneinfo.available_timezones",
        side_effect=OSError("tzdata missing"),
    ):
        with pytest.raises(ReferenceDataUnavailableError, match="tzdata missing"):
            PackagedReferenceDataset().load()


def test_guess_timezone():
    with patch(
        "geo_constants.infrastructure.reference.dataset.get_localzone_name",
        return_value="Africa/Nairobi",
    ):
        assert PackagedReferenceDataset().guess_timezone() == "Africa/Nairobi"


@pytest.mark.parametrize("outcome", [None, LookupError("no zone")])
def test_guess_timezone_falls_back_to_utc(outcome):
    kwargs = (
        {"side_effect": outcome}
        if isinstance(outcome, Exception)
        else {"return_value": outcome}
    )
    with patch(
        "geo_constants.infrastructure.reference.dataset.get_localzone_name", **kwargs
    ):
        assert PackagedReferenceDataset().guess_timezone() == "UTC"
