import pytest

from geo_constants.domain.normalizers import (
    flatten,
    flatten_and_dedupe_sorted,
    sorted_uniq,
    start_case,
    title_case_all,
    to_upper_all,
)


@pytest.mark.parametrize(
    "values, expected",
    [
        (["en"], ("en",)),
        (["sw", "en", "sw", "fr"], ("en", "fr", "sw")),
        (["b", "B", "a"], ("a", "B", "b")),
        (["city", "Other", "country"], ("city", "country", "Other")),
        (["255", "", None, "1"], ("1", "255")),
        ([], ()),
    ],
)
def test_sorted_uniq(values, expected):
    assert sorted_uniq(values) == expected


def test_sorted_uniq_is_idempotent():
    once = sorted_uniq(["Response", "Mitigation", "Recovery", "Mitigation"])
    assert sorted_uniq(once) == once


def test_flatten_nested_lists_and_scalars():
    assert flatten([["city", ["country"]], "Other", None]) == [
        "city",
        "country",
        "Other",
    ]


def test_flatten_keeps_strings_whole():
    assert flatten("city") == ["city"]


def test_flatten_and_dedupe_sorted():
    result = flatten_and_dedupe_sorted(["town", "city"], "Other", ["city"])
    assert result == ("city", "Other", "town")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("city", "City"),
        ("neighbourhood", "Neighbourhood"),
        ("stop_area", "Stop Area"),
        ("stop-position", "Stop Position"),
        ("manMade", "Man Made"),
        ("XMLHttp", "XML Http"),
        ("ward 12", "Ward 12"),
        ("level2", "Level 2"),
        ("  public   transport ", "Public Transport"),
        ("Other", "Other"),
        ("", ""),
    ],
)
def test_start_case(value, expected):
    assert start_case(value) == expected


def test_case_transforms_preserve_order_and_length():
    values = ("ke", "tz", "ug")
    assert to_upper_all(values) == ("KE", "TZ", "UG")
    assert title_case_all(values) == ("Ke", "Tz", "Ug")


def test_case_transforms_do_not_deduplicate():
    assert to_upper_all(("TZ", "tz")) == ("TZ", "TZ")
    assert title_case_all(("city", "City")) == ("City", "City")


def test_sorted_uniq_orders_timezones_ignoring_case():
    values = ["CET", "Australia/NSW", "Canada/Yukon", "Australia/North"]
    assert sorted_uniq(values) == (
        "Australia/North",
        "Australia/NSW",
        "Canada/Yukon",
        "CET",
    )
