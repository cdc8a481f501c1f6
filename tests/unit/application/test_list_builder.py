import logging

from geo_constants.application.services.list_builder import OrderedUniqueListBuilder
from tests.mocks import MalformedListConfigReader, MockConfigReader


def test_build_without_override_returns_fallback():
    builder = OrderedUniqueListBuilder(MockConfigReader())
    assert builder.build("LOCALES", ["en"]) == ("en",)


def test_build_scalar_fallback():
    builder = OrderedUniqueListBuilder(MockConfigReader())
    assert builder.build("LOCALES", "en") == ("en",)


def test_build_override_is_deduped_and_sorted():
    builder = OrderedUniqueListBuilder(MockConfigReader({"LOCALES": "sw, en,fr,sw"}))
    assert builder.build("LOCALES", ["en"]) == ("en", "fr", "sw")


def test_build_override_replaces_fallback():
    builder = OrderedUniqueListBuilder(MockConfigReader({"LOCALES": "sw"}))
    assert builder.build("LOCALES", ["en"]) == ("sw",)


def test_build_fallback_is_deduped_and_sorted():
    builder = OrderedUniqueListBuilder(MockConfigReader())
    result = builder.build(
        "DISASTER_PHASES", ["Mitigation", "Preparedness", "Response", "Recovery"]
    )
    assert result == ("Mitigation", "Preparedness", "Recovery", "Response")


def test_build_empty_override_falls_back():
    builder = OrderedUniqueListBuilder(MockConfigReader({"LOCALES": " , "}))
    assert builder.build("LOCALES", "en") == ("en",)


def test_build_is_idempotent():
    builder = OrderedUniqueListBuilder(MockConfigReader())
    once = builder.build("TIMEZONES", ["UTC", "Africa/Nairobi", "UTC"])
    assert builder.build("TIMEZONES", once) == once


def test_build_malformed_override_is_kept_as_single_entry(caplog):
    builder = OrderedUniqueListBuilder(
        MalformedListConfigReader({"DISASTER_PHASES": " Response;Recovery "})
    )
    with caplog.at_level(logging.WARNING):
        result = builder.build("DISASTER_PHASES", ["Mitigation"])

    assert result == ("Response;Recovery",)
    assert "DISASTER_PHASES" in caplog.text
