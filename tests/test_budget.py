"""Techos de presupuesto por categoría y validación de precio de formularios."""

import pytest

from dealhunter.admission import (
    BUDGET_LIMITS,
    UnknownCategoryError,
    budget_ceiling,
    exceeds_budget,
    submission_price_error,
)
from dealhunter.models import Category


class TestBudgetCeiling:
    @pytest.mark.parametrize(
        "category,limit",
        [
            (Category.VACATION, 450),
            (Category.SUITE, 450),
            (Category.PENTHOUSE, 990),
            (Category.VILLA, 1990),
        ],
    )
    def test_known_categories(self, category, limit):
        assert budget_ceiling(category) == limit

    def test_accepts_raw_string(self):
        assert budget_ceiling("villa") == 1990

    def test_unknown_category_raises(self):
        with pytest.raises(UnknownCategoryError):
            budget_ceiling("castle")

    def test_unknown_category_is_a_key_error(self):
        with pytest.raises(KeyError):
            budget_ceiling("")

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            BUDGET_LIMITS[Category.VILLA] = 5000  # type: ignore[index]

    def test_every_category_has_a_ceiling(self):
        assert set(BUDGET_LIMITS) == set(Category)


class TestExceedsBudget:
    def test_price_at_ceiling_is_within(self):
        assert exceeds_budget(Category.VILLA, 1990) is False

    def test_one_over_ceiling_exceeds(self):
        assert exceeds_budget(Category.VILLA, 1991) is True

    def test_fractional_over_ceiling_exceeds(self):
        assert exceeds_budget(Category.SUITE, 450.5) is True


class TestSubmissionPriceError:
    def test_valid_price(self):
        assert submission_price_error(Category.PENTHOUSE, 990) is None

    def test_missing_price(self):
        assert submission_price_error(Category.PENTHOUSE, None) == (
            "Price must be between 1 and 990 ₪"
        )

    def test_zero_price(self):
        assert submission_price_error(Category.VACATION, 0) is not None

    def test_over_ceiling(self):
        assert "450" in submission_price_error(Category.SUITE, 451)
