"""Tests for the filter pipeline."""
import math

import pytest
from src.parse.filters import filter_cats
from src.parse.models import AgedCat, FilterOptions


def make_cats():
    return [
        AgedCat(name="Killing", tags=["indekat", "Odense"], age_in_months=2),
        AgedCat(name="Unknown", tags=["udekat"], age_in_months=-1),
        AgedCat(name="Adopted", tags=["indekat"], is_sold=True, age_in_months=12),
        AgedCat(name="Senior", tags=["Indekat", "Odense"], age_in_months=120),
        AgedCat(name="Young", tags=["indekat"], age_in_months=6),
    ]


def names(cats):
    return [cat.name for cat in cats]


def test_defaults_only_drop_sold():
    """Test default options keep every available cat."""
    result = filter_cats(make_cats(), FilterOptions())
    assert names(result) == ["Killing", "Unknown", "Senior", "Young"]


def test_include_sold():
    """Test only_available=False keeps sold cats."""
    result = filter_cats(make_cats(), FilterOptions(only_available=False))
    assert names(result) == names(make_cats())


def test_only_available_never_returns_sold():
    """Test no sold cat survives when only_available is set."""
    for options in (FilterOptions(), FilterOptions(tags=["indekat"]), FilterOptions(min_age_in_months=0)):
        assert all(not cat.is_sold for cat in filter_cats(make_cats(), options))


def test_min_age_drops_unknown():
    """Test the -1 sentinel fails any minimum age."""
    result = filter_cats(make_cats(), FilterOptions(min_age_in_months=0))
    assert names(result) == ["Killing", "Senior", "Young"]

    result = filter_cats(make_cats(), FilterOptions(min_age_in_months=6))
    assert names(result) == ["Senior", "Young"]


def test_negative_min_age_is_ignored():
    """Test a negative minimum is not a bound."""
    result = filter_cats(make_cats(), FilterOptions(min_age_in_months=-5))
    assert "Unknown" in names(result)


def test_max_age_compares_min_bound_by_default():
    """Test the maximum stage keeps cats up to the minimum age."""
    options = FilterOptions(min_age_in_months=6, max_age_in_months=100)
    assert names(filter_cats(make_cats(), options)) == ["Young"]


def test_max_age_without_min_age_drops_everything():
    """Test the maximum stage with an unset minimum keeps nothing."""
    options = FilterOptions(max_age_in_months=100)
    assert filter_cats(make_cats(), options) == []


def test_strict_max_age():
    """Test strict mode compares against the maximum bound."""
    options = FilterOptions(max_age_in_months=6, strict_max_age=True)
    assert names(filter_cats(make_cats(), options)) == ["Killing", "Unknown", "Young"]

    options = FilterOptions(min_age_in_months=0, max_age_in_months=6, strict_max_age=True)
    assert names(filter_cats(make_cats(), options)) == ["Killing", "Young"]


def test_max_age_infinity_is_a_bound():
    """Test +inf maximum still runs the stage."""
    options = FilterOptions(min_age_in_months=0, max_age_in_months=math.inf, strict_max_age=True)
    assert names(filter_cats(make_cats(), options)) == ["Killing", "Senior", "Young"]


def test_tags_are_all_required_and_case_sensitive():
    """Test tag filtering needs every tag with exact case."""
    result = filter_cats(make_cats(), FilterOptions(tags=["indekat"]))
    assert names(result) == ["Killing", "Young"]

    result = filter_cats(make_cats(), FilterOptions(tags=["indekat", "Odense"]))
    assert names(result) == ["Killing"]

    result = filter_cats(make_cats(), FilterOptions(tags=["INDEKAT"]))
    assert result == []


def test_order_is_preserved():
    """Test surviving cats keep their relative order."""
    cats = list(reversed(make_cats()))
    result = filter_cats(cats, FilterOptions(only_available=False))
    assert names(result) == names(cats)


def test_camel_case_options():
    """Test upstream option names are accepted."""
    options = FilterOptions.model_validate(
        {"tags": ["indekat"], "minAgeInMonths": 3, "maxAgeInMonths": 10, "onlyAvailable": False}
    )
    assert options.min_age_in_months == 3
    assert options.max_age_in_months == 10
    assert options.only_available is False
    assert options.strict_max_age is False


@pytest.mark.parametrize("value", [None, math.nan])
def test_unset_min_age(value):
    """Test None and NaN minimums are skipped."""
    result = filter_cats(make_cats(), FilterOptions(min_age_in_months=value))
    assert "Unknown" in names(result)
