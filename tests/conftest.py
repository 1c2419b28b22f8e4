"""Fixtures compartidas.

Ningún test toca Supabase, OpenAI ni la red: los colaboradores se
reemplazan por fakes y los settings salen de variables de entorno.
"""

from typing import Any, Optional

import pytest

from dealhunter.config import get_settings
from dealhunter.models import Category, DealSubmission, RawListing, StoredDeal


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    """Settings mínimos y sin API keys reales."""
    monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
    monkeypatch.setenv("SUPABASE_KEY", "test-anon-key")
    monkeypatch.setenv("CRON_SECRET", "cron-test-secret")
    for var in ("OPENAI_API_KEY", "GEMINI_API_KEY", "GROQ_API_KEY", "LLM_PROVIDER"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_raw(
    deal_id: int = 1,
    category: Category = Category.VACATION,
    price: Any = 400,
    url: str = "https://example.com/deal",
    is_domestic: bool = True,
    name: Optional[str] = None,
    location: str = "תל אביב",
) -> RawListing:
    return RawListing(
        id=deal_id,
        category=category,
        property_name=name or f"Deal {deal_id}",
        location=location,
        description="",
        is_domestic=is_domestic,
        price_per_night=price,
        url=url,
    )


def make_stored(deal_id: int = 1000, owner_id: str = "user-1", **overrides) -> StoredDeal:
    data = {
        "id": deal_id,
        "user_id": owner_id,
        "category": Category.SUITE,
        "property_name": "סוויטה בחיפה",
        "location": "חיפה",
        "price_per_night": 420,
        "description": "נוף לים",
        "url": "https://www.booking.com/hotel/il/haifa-suite.html",
        "host_name": "Dana",
        "host_phone": "050-0000000",
        "amenities": ["jacuzzi", "wifi"],
        "image_url": "https://cdn.example.com/deals/1.png",
    }
    data.update(overrides)
    return StoredDeal(**data)


class FakeDealRepository:
    """Repositorio en memoria con la misma interfaz que DealRepository."""

    def __init__(self, deals: Optional[list[StoredDeal]] = None):
        self.deals = list(deals or [])
        self.next_id = 1000 + len(self.deals)

    def create(self, owner_id: str, submission: DealSubmission, image_url=None) -> StoredDeal:
        data = submission.model_dump(exclude={"image_url"})
        deal = StoredDeal(id=self.next_id, user_id=owner_id, image_url=image_url, **data)
        self.next_id += 1
        self.deals.insert(0, deal)
        return deal

    def list_all(self) -> list[StoredDeal]:
        return list(self.deals)

    def list_by_owner(self, owner_id: str) -> list[StoredDeal]:
        return [d for d in self.deals if d.user_id == owner_id]

    def get_by_id(self, deal_id: int) -> Optional[StoredDeal]:
        return next((d for d in self.deals if d.id == deal_id), None)

    def update_owned(self, owner_id: str, deal_id: int, submission: DealSubmission):
        for i, deal in enumerate(self.deals):
            if deal.id == deal_id and deal.user_id == owner_id:
                changes = submission.model_dump(exclude_none=True)
                updated = deal.model_copy(update=changes)
                self.deals[i] = updated
                return updated
        return None

    def delete_owned(self, owner_id: str, deal_id: int) -> bool:
        before = len(self.deals)
        self.deals = [
            d for d in self.deals if not (d.id == deal_id and d.user_id == owner_id)
        ]
        return len(self.deals) < before


@pytest.fixture()
def fake_repo() -> FakeDealRepository:
    return FakeDealRepository()
