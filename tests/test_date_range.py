"""Tests for date-range extraction and normalization."""

from app.core.date_range import extract_date_range, has_date_range, resolve_date


def test_month_year_to_present():
    dr = extract_date_range("Jan 2023 – Present")
    assert dr.start_date == "2023-01-01"
    assert dr.end_date == "Present"


def test_present_sentinel_any_case():
    """Present/Current/Ongoing always map to the literal sentinel."""
    assert extract_date_range("JAN 2023 - PRESENT").end_date == "Present"
    assert extract_date_range("March 2021 — current").end_date == "Present"
    assert extract_date_range("September 2020 to Ongoing").end_date == "Present"
    assert extract_date_range("2019 - Current").end_date == "Present"


def test_month_year_to_month_year():
    dr = extract_date_range("Aug 2021 - May 2022")
    assert dr.start_date == "2021-08-01"
    assert dr.end_date == "2022-05-01"


def test_year_to_year():
    dr = extract_date_range("Delhi University 2018 – 2022")
    assert dr.start_date == "2018-01-01"
    assert dr.end_date == "2022-01-01"


def test_single_month_year_is_start_only():
    dr = extract_date_range("Joined in March 2020")
    assert dr.start_date == "2020-03-01"
    assert dr.end_date == ""


def test_no_dates_yields_empty_strings():
    dr = extract_date_range("Led a team of five engineers")
    assert dr.start_date == ""
    assert dr.end_date == ""


def test_empty_input_does_not_raise():
    dr = extract_date_range("")
    assert (dr.start_date, dr.end_date) == ("", "")


def test_abbreviated_months():
    dr = extract_date_range("Sept 2021 - Dec 2021")
    assert dr.start_date == "2021-09-01"
    assert dr.end_date == "2021-12-01"


def test_resolve_date_failure_degrades_to_empty():
    assert resolve_date("Smarch 2020") == ""
    assert resolve_date("") == ""


def test_has_date_range():
    assert has_date_range("Jun 2018 – Dec 2020")
    assert has_date_range("2016 - 2020")
    assert not has_date_range("Senior Software Engineer")
    assert not has_date_range("Joined in March 2020")
