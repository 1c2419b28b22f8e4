"""Pipeline de admisión: reglas, orden, conteos y catálogo semilla."""

import pytest

from conftest import make_raw
from dealhunter.admission import UnknownCategoryError, admit
from dealhunter.deals import load_seed_deals
from dealhunter.models import Category, RawListing, RejectionType


# ---------------------------------------------------------------------------
# Escenarios básicos
# ---------------------------------------------------------------------------

class TestSingleCandidate:
    def test_villa_at_ceiling_is_accepted(self):
        result = admit([make_raw(category=Category.VILLA, price=1990)])

        assert [listing.id for listing in result.accepted] == [1]
        assert result.rejections == ()
        assert result.rejected_count == 0

    def test_villa_over_ceiling_is_budget_rejection(self):
        result = admit([make_raw(category=Category.VILLA, price=1991)])

        assert result.accepted == ()
        assert result.rejected_by_budget == 1
        rejection = result.rejections[0]
        assert rejection.type == RejectionType.BUDGET
        assert "1991" in rejection.reason
        assert "1990" in rejection.reason
        assert "+1" in rejection.reason

    def test_foreign_deal_is_location_rejection(self):
        result = admit([
            make_raw(is_domestic=False, location="Paris", name="Hotel de Paris")
        ])

        assert result.rejected_by_location == 1
        rejection = result.rejections[0]
        assert rejection.type == RejectionType.LOCATION
        assert rejection.name == "Hotel de Paris"
        assert "Paris" in rejection.reason

    def test_fragment_url_is_url_rejection(self):
        result = admit([make_raw(url="#search")])

        assert result.rejected_by_url == 1
        assert result.rejections[0].type == RejectionType.URL
        assert "#search" in result.rejections[0].reason

    def test_empty_url_reason(self):
        result = admit([make_raw(url="")])

        assert result.rejections[0].reason == "Deep link inválido: URL faltante"

    def test_long_url_is_truncated_in_reason(self):
        url = "http://example.com/" + "a" * 100
        result = admit([make_raw(url=url)])

        reason = result.rejections[0].reason
        assert url[:35] in reason
        assert url[:36] not in reason
        assert reason.endswith('…"')

    def test_accepted_listing_has_no_domestic_flag(self):
        result = admit([make_raw()])

        assert "is_domestic" not in result.accepted[0].model_dump()

    def test_accepted_listing_keeps_fields(self):
        raw = make_raw(deal_id=7, category=Category.PENTHOUSE, price=850)
        listing = admit([raw]).accepted[0]

        assert listing.id == 7
        assert listing.category == Category.PENTHOUSE
        assert listing.price_per_night == 850
        assert listing.url == raw.url
        assert listing.property_name == raw.property_name


# ---------------------------------------------------------------------------
# Orden y atribución
# ---------------------------------------------------------------------------

class TestBatch:
    def test_mixed_batch(self):
        candidates = [
            make_raw(deal_id=1),
            make_raw(deal_id=2, price=451),
            make_raw(deal_id=3),
            make_raw(deal_id=4, url="/relative/path"),
            make_raw(deal_id=5),
        ]
        result = admit(candidates)

        assert [listing.id for listing in result.accepted] == [1, 3, 5]
        assert [r.name for r in result.rejections] == ["Deal 2", "Deal 4"]
        assert result.rejected_count == 2
        assert result.rejected_by_budget == 1
        assert result.rejected_by_url == 1
        assert result.rejected_by_location == 0

    def test_order_is_preserved(self):
        ids = [9, 3, 7, 1, 5]
        result = admit([make_raw(deal_id=i) for i in ids])

        assert [listing.id for listing in result.accepted] == ids

    def test_first_failure_wins(self):
        # Falla las tres reglas: solo cuenta la de ubicación
        deal = make_raw(is_domestic=False, price=99999, url="#")
        result = admit([deal])

        assert result.rejected_by_location == 1
        assert result.rejected_by_budget == 0
        assert result.rejected_by_url == 0
        assert len(result.rejections) == 1

    def test_budget_checked_before_url(self):
        result = admit([make_raw(price=500, url="")])

        assert result.rejections[0].type == RejectionType.BUDGET

    def test_every_candidate_lands_exactly_once(self):
        candidates = [
            make_raw(deal_id=1),
            make_raw(deal_id=2, is_domestic=False),
            make_raw(deal_id=3, price=5000),
            make_raw(deal_id=4, url="http://insecure.example"),
            make_raw(deal_id=5, category=Category.VILLA, price=1500),
        ]
        result = admit(candidates)

        assert len(result.accepted) + result.rejected_count == len(candidates)
        assert result.rejected_count == len(result.rejections)

    def test_is_idempotent(self):
        candidates = load_seed_deals()

        assert admit(candidates) == admit(candidates)

    def test_input_is_not_mutated(self):
        candidates = [make_raw(deal_id=1), make_raw(deal_id=2, price=9999)]
        snapshot = [c.model_copy() for c in candidates]

        admit(candidates)

        assert candidates == snapshot

    def test_empty_batch(self):
        result = admit([])

        assert result.accepted == ()
        assert result.rejected_count == 0

    def test_accepts_generator(self):
        result = admit(make_raw(deal_id=i) for i in range(3))

        assert len(result.accepted) == 3


# ---------------------------------------------------------------------------
# Datos malformados
# ---------------------------------------------------------------------------

class TestMalformedCandidates:
    def test_unparseable_price_is_budget_rejection(self):
        raw = RawListing.from_record({
            "id": 1,
            "category": "vacation",
            "property_name": "Sin precio",
            "is_domestic": True,
            "price_per_night": "a consultar",
            "url": "https://example.com",
        })
        result = admit([raw])

        assert result.rejected_by_budget == 1
        assert "inválido" in result.rejections[0].reason

    def test_missing_price_is_budget_rejection(self):
        result = admit([make_raw(price=None)])

        assert result.rejected_by_budget == 1

    @pytest.mark.parametrize("price", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_price_is_budget_rejection(self, price):
        result = admit([make_raw(price=price)])

        assert result.accepted == ()
        assert result.rejected_by_budget == 1
        assert "inválido" in result.rejections[0].reason

    def test_missing_domestic_flag_is_location_rejection(self):
        raw = RawListing.from_record({
            "id": 1,
            "category": "suite",
            "price_per_night": 300,
            "location": "Paris",
            "url": "https://example.com",
        })

        assert raw.is_domestic is False
        result = admit([raw])
        assert result.accepted == ()
        assert result.rejected_by_location == 1

    def test_price_with_thousands_separator(self):
        raw = RawListing.from_record({
            "id": 1,
            "category": "villa",
            "is_domestic": True,
            "price_per_night": "1,500",
            "url": "https://example.com",
        })

        assert admit([raw]).accepted[0].price_per_night == 1500

    def test_non_string_url_is_url_rejection(self):
        raw = RawListing.from_record({
            "id": 1,
            "category": "suite",
            "is_domestic": True,
            "price_per_night": 300,
            "url": None,
        })

        assert admit([raw]).rejected_by_url == 1

    def test_legacy_domestic_field(self):
        raw = RawListing.from_record({
            "id": 1,
            "category": "suite",
            "is_in_israel": False,
            "price_per_night_ils": 300,
            "url": "https://example.com",
        })

        assert admit([raw]).rejected_by_location == 1

    def test_unknown_category_cannot_enter_pipeline(self):
        with pytest.raises(ValueError):
            RawListing.from_record({
                "id": 1,
                "category": "castle",
                "is_domestic": True,
                "price_per_night": 300,
                "url": "https://example.com",
            })

    def test_unknown_category_from_duck_typed_candidate(self):
        raw = RawListing.model_construct(
            id=1,
            category="castle",
            property_name="x",
            location="",
            description="",
            is_domestic=True,
            price_per_night=100,
            url="https://example.com",
        )

        with pytest.raises(UnknownCategoryError):
            admit([raw])


# ---------------------------------------------------------------------------
# Catálogo semilla
# ---------------------------------------------------------------------------

class TestSeedCatalog:
    def test_counts(self):
        result = admit(load_seed_deals())

        assert len(result.accepted) == 8
        assert result.rejected_by_location == 3
        assert result.rejected_by_budget == 3
        assert result.rejected_by_url == 4
        assert result.rejected_count == 10

    def test_accepted_ids_in_file_order(self):
        result = admit(load_seed_deals())

        assert [listing.id for listing in result.accepted] == [1, 2, 4, 5, 6, 7, 29, 10]

    def test_all_accepted_links_are_https(self):
        result = admit(load_seed_deals())

        assert all(listing.url.startswith("https://") for listing in result.accepted)
