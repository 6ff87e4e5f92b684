"""Integration tests for the article endpoints, each against a fresh app."""

import warnings
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from article_catalog.config import Settings
from article_catalog.infrastructure.memory import SAMPLE_ARTICLES
from article_catalog.main import create_app

BASE = "/api/v1/articles"


def _payload(article_number: int = 100298, **overrides) -> dict:
    payload = {
        "articleNumber": article_number,
        "name": "Gravel cranks pro",
        "articleCategory": "Crank arm",
        "bicycleCategory": "Gravel, e-Gravel",
        "material": "Carbon",
        "lengthInMm": 175,
        "widthInMm": 12,
        "heightInMm": 25,
        "netWeightInGramm": 140,
    }
    payload.update(overrides)
    return payload


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Client for an app whose store holds the sample catalog."""
    application = create_app(Settings(_env_file=None, seed_sample_data=True))
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def empty_client() -> AsyncIterator[AsyncClient]:
    """Client for an app whose store starts empty."""
    application = create_app(Settings(_env_file=None, seed_sample_data=False))
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# ── Listing ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_returns_seeded_articles_in_camel_case(client: AsyncClient):
    response = await client.get(BASE)

    assert response.status_code == 200
    data = response.json()
    assert [a["articleNumber"] for a in data] == [s.article_number for s in SAMPLE_ARTICLES]
    assert set(data[0]) == {
        "id",
        "articleNumber",
        "name",
        "articleCategory",
        "bicycleCategory",
        "material",
        "lengthInMm",
        "widthInMm",
        "heightInMm",
        "netWeightInGramm",
        "createdAt",
        "updatedAt",
    }


@pytest.mark.asyncio
async def test_list_filters_by_multiple_bicycle_categories(client: AsyncClient):
    response = await client.get(BASE, params={"bicycleCategory": "Road,Gravel"})
    numbers = [a["articleNumber"] for a in response.json()]
    assert numbers == [100292, 100293, 100296]


@pytest.mark.asyncio
async def test_list_filters_case_insensitively(client: AsyncClient):
    response = await client.get(BASE, params={"material": "aluminium", "articleCategory": "crank arm"})
    assert [a["articleNumber"] for a in response.json()] == [100295]


@pytest.mark.asyncio
async def test_list_sorts_descending(client: AsyncClient):
    response = await client.get(BASE, params={"sortBy": "netWeightInGramm", "sortDescending": "true"})
    weights = [a["netWeightInGramm"] for a in response.json()]
    assert weights == sorted(weights, reverse=True)


@pytest.mark.asyncio
async def test_list_with_unknown_sort_field_matches_default_order(client: AsyncClient):
    default = await client.get(BASE)
    bogus = await client.get(BASE, params={"sortBy": "bogusField", "sortDescending": "true"})
    assert bogus.json() == default.json()


# ── Reading ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_article_by_id(client: AsyncClient):
    response = await client.get(f"{BASE}/3")
    assert response.status_code == 200
    assert response.json()["bicycleCategory"] == "Gravel, e-Gravel"


@pytest.mark.asyncio
async def test_get_missing_article_returns_404_error_body(client: AsyncClient):
    response = await client.get(f"{BASE}/999", headers={"X-Request-ID": "trace-123"})

    assert response.status_code == 404
    body = response.json()
    assert body["statusCode"] == 404
    assert body["traceId"] == "trace-123"
    assert "999" in body["message"]


@pytest.mark.asyncio
async def test_article_number_exists_endpoint(client: AsyncClient):
    taken = await client.get(f"{BASE}/exists", params={"articleNumber": 100291})
    own = await client.get(f"{BASE}/exists", params={"articleNumber": 100291, "excludeId": 1})
    free = await client.get(f"{BASE}/exists", params={"articleNumber": 1})

    assert taken.json() == {"articleNumber": 100291, "exists": True}
    assert own.json()["exists"] is False
    assert free.json()["exists"] is False


# ── Creating ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_article_returns_201_and_location(empty_client: AsyncClient):
    response = await empty_client.post(BASE, json=_payload())

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == 1
    assert data["createdAt"] == data["updatedAt"]
    assert response.headers["location"] == f"{BASE}/1"

    fetched = await empty_client.get(f"{BASE}/1")
    assert fetched.json() == data


@pytest.mark.asyncio
async def test_create_accepts_snake_case_fields(empty_client: AsyncClient):
    payload = {
        "article_number": 5,
        "name": "Snake hub",
        "article_category": "Hub",
        "bicycle_category": "Road",
        "material": "Steel",
        "length_in_mm": 1,
        "width_in_mm": 1,
        "height_in_mm": 1,
        "net_weight_in_gramm": 1,
    }
    response = await empty_client.post(BASE, json=payload)
    assert response.status_code == 201
    assert response.json()["articleNumber"] == 5


@pytest.mark.asyncio
async def test_create_duplicate_number_returns_409(client: AsyncClient):
    response = await client.post(BASE, json=_payload(100291))

    assert response.status_code == 409
    assert response.json()["statusCode"] == 409
    listing = await client.get(BASE)
    assert len(listing.json()) == len(SAMPLE_ARTICLES)


@pytest.mark.asyncio
async def test_create_with_invalid_fields_returns_422(empty_client: AsyncClient):
    response = await empty_client.post(
        BASE, json=_payload(0, name="x", lengthInMm=0, netWeightInGramm=100_001)
    )

    assert response.status_code == 422
    body = response.json()
    assert body["message"] == "Validation failed"
    assert {"articleNumber", "name", "lengthInMm", "netWeightInGramm"} <= set(body["errors"])


@pytest.mark.asyncio
async def test_validation_error_emits_no_deprecated_status_warning(empty_client: AsyncClient):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        response = await empty_client.post(BASE, json=_payload(0))

    assert response.status_code == 422
    assert response.json()["statusCode"] == 422
    assert not [w for w in caught if "UNPROCESSABLE_ENTITY" in str(w.message)]


@pytest.mark.asyncio
async def test_create_rejects_blank_name(empty_client: AsyncClient):
    response = await empty_client.post(BASE, json=_payload(name="   "))
    assert response.status_code == 422


# ── Updating ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_update_article(client: AsyncClient):
    before = (await client.get(f"{BASE}/3")).json()
    response = await client.put(f"{BASE}/3", json=_payload(100293, name="Gravel hub speed pro 2"))

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 3
    assert data["name"] == "Gravel hub speed pro 2"
    assert data["createdAt"] == before["createdAt"]


@pytest.mark.asyncio
async def test_update_missing_article_returns_404(client: AsyncClient):
    response = await client.put(f"{BASE}/999", json=_payload())
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_to_taken_number_returns_409(client: AsyncClient):
    response = await client.put(f"{BASE}/3", json=_payload(100291))

    assert response.status_code == 409
    unchanged = await client.get(f"{BASE}/3")
    assert unchanged.json()["articleNumber"] == 100293


# ── End-to-end ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_cargo_and_gravel_scenario_over_http(empty_client: AsyncClient):
    await empty_client.post(BASE, json=_payload(100291, bicycleCategory="e-Cargo bike"))
    created = await empty_client.post(BASE, json=_payload(100293, bicycleCategory="Gravel, e-Gravel"))
    gravel_id = created.json()["id"]

    hits = await empty_client.get(BASE, params={"bicycleCategory": "e-Gravel"})
    assert [a["id"] for a in hits.json()] == [gravel_id]

    duplicate = await empty_client.post(BASE, json=_payload(100291))
    assert duplicate.status_code == 409

    clash = await empty_client.put(f"{BASE}/{gravel_id}", json=_payload(100291))
    assert clash.status_code == 409

    same = await empty_client.put(
        f"{BASE}/{gravel_id}", json=_payload(100293, bicycleCategory="Gravel, e-Gravel")
    )
    assert same.status_code == 200
