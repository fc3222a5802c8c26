"""Age derivation — calendar-year difference, decremented before the birthday."""

from datetime import date

from nurse_registry.core.age import derive_age

TODAY = date(2024, 6, 15)


def test_birthday_already_passed_this_year():
    assert derive_age("1990-01-01", TODAY) == 34


def test_birthday_today_counts():
    assert derive_age("1990-06-15", TODAY) == 34


def test_birthday_later_this_year_decrements():
    assert derive_age("1990-06-16", TODAY) == 33
    assert derive_age("1990-12-01", TODAY) == 33


def test_accepts_date_objects():
    assert derive_age(date(2000, 2, 29), date(2024, 2, 28)) == 23


def test_unparseable_dob_returns_none():
    assert derive_age("yesterday", TODAY) is None


def test_future_or_same_year_dob_returns_none():
    assert derive_age("2024-01-01", TODAY) is None
    assert derive_age("2030-01-01", TODAY) is None
