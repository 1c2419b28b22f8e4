"""Prompts de imagen e imágenes por ubicación."""

import pytest

from dealhunter.imagery import (
    AMENITY_LABELS,
    AMENITY_VISUALS,
    CATEGORY_SUBJECT,
    amenity_key,
    build_image_prompt,
    fallback_image,
    location_image,
)
from dealhunter.imagery.location_images import DEFAULT_LOCATION_IMAGE, LOCATION_IMAGES
from dealhunter.models import Category


class TestBuildImagePrompt:
    def test_is_deterministic(self):
        args = (Category.VILLA, "קיסריה", "וילה עם בריכה", ["pool", "bbq"])

        assert build_image_prompt(*args) == build_image_prompt(*args)

    @pytest.mark.parametrize("category", list(Category))
    def test_includes_category_subject(self, category):
        prompt = build_image_prompt(category, "אילת")

        assert CATEGORY_SUBJECT[category] in prompt

    def test_includes_location_and_country(self):
        prompt = build_image_prompt(Category.SUITE, "ירושלים")

        assert "in ירושלים, Israel." in prompt

    def test_blank_location_uses_country_only(self):
        prompt = build_image_prompt(Category.SUITE, "   ")

        assert "in Israel." in prompt
        assert ", Israel." not in prompt

    def test_visual_amenities_are_described(self):
        prompt = build_image_prompt(Category.VILLA, "קיסריה", amenities=["pool", "jacuzzi"])

        assert AMENITY_VISUALS["pool"] in prompt
        assert AMENITY_VISUALS["jacuzzi"] in prompt
        assert prompt.index(AMENITY_VISUALS["pool"]) < prompt.index(AMENITY_VISUALS["jacuzzi"])

    def test_unmapped_amenities_never_appear(self):
        prompt = build_image_prompt(
            Category.VACATION, "טבריה", amenities=["wifi", "pet_friendly", "helipad"]
        )

        assert prompt == build_image_prompt(Category.VACATION, "טבריה")
        assert "The property features" not in prompt

    def test_hebrew_labels_map_to_visuals(self):
        prompt = build_image_prompt(
            Category.VILLA, "גליל", amenities=[AMENITY_LABELS["bbq"], AMENITY_LABELS["pool"]]
        )

        assert AMENITY_VISUALS["bbq"] in prompt
        assert AMENITY_VISUALS["pool"] in prompt

    def test_description_is_not_included(self):
        prompt = build_image_prompt(Category.SUITE, "חיפה", description="cartoon dragon")

        assert "dragon" not in prompt

    def test_unknown_category_raises(self):
        with pytest.raises(ValueError):
            build_image_prompt("castle", "חיפה")


class TestAmenityKey:
    def test_label_to_key(self):
        assert amenity_key("ג'קוזי") == "jacuzzi"

    def test_key_passes_through(self):
        assert amenity_key(" pool ") == "pool"


class TestLocationImage:
    def test_known_city(self):
        assert location_image("יפו, תל אביב") != DEFAULT_LOCATION_IMAGE

    def test_first_keyword_wins(self):
        location = "יפו, תל אביב"
        first = next(url for keyword, url in LOCATION_IMAGES if keyword in location)

        assert location_image(location) == first

    def test_unknown_location_uses_default(self):
        assert location_image("Paris") == DEFAULT_LOCATION_IMAGE

    def test_empty_location_uses_default(self):
        assert location_image("") == DEFAULT_LOCATION_IMAGE


class TestFallbackImage:
    @pytest.mark.parametrize("category", list(Category))
    def test_every_category_has_fallback(self, category):
        assert fallback_image(category).startswith("https://")

    def test_accepts_raw_string(self):
        assert fallback_image("villa") == fallback_image(Category.VILLA)
