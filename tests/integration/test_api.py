import pytest
from fastapi.testclient import TestClient

from tests.markup import MATCH_URL
from xgstats.api.main import create_fastapi_app
from xgstats.common.playwright_utils import NavigationError
from xgstats.core.config import Settings
from xgstats.data_collection.scrapers.xgstat.assembler import parse_xgstat_page
from xgstats.database.manager import DatabaseManager
from xgstats.database.services.xgstat_fixtures import RepositoryError


class FakeScraper:
    def __init__(self, html="", error=None):
        self.html = html
        self.error = error
        self.calls = []

    async def scrape(self, url):
        self.calls.append(url)
        if self.error:
            raise self.error
        return parse_xgstat_page(self.html, url)


@pytest.fixture
def db():
    manager = DatabaseManager("sqlite:///:memory:")
    manager.initialize()
    yield manager
    manager.close()


def make_client(scraper, db=None, persist=True):
    app = create_fastapi_app(Settings(_env_file=None), scraper=scraper, db_manager=db, persist=persist)
    return TestClient(app)


def test_scrape_returns_fixture_and_persists(full_match_html, db):
    with make_client(FakeScraper(full_match_html), db) as client:
        resp = client.post("/api/scrape/xgstats", json={"url": MATCH_URL})
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["error"] is None
        assert body["execution_time_ms"] >= 0
        data = body["data"]
        assert list(data)[:4] == ["gameweek", "id", "date", "home_team"]
        assert data["id"] == 4821
        assert data["home_score"] == 2
        assert len(data["home_shots"]) == 6

        stored = client.get("/api/xgstats", params={"id": "4821"})
        assert stored.status_code == 200
        assert stored.json()["data"] == data


def test_scrape_rejects_empty_url(db):
    scraper = FakeScraper()
    with make_client(scraper, db) as client:
        resp = client.post("/api/scrape/xgstats", json={"url": "  "})
    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert resp.json()["error"] == "URL is required"
    assert scraper.calls == []


def test_scrape_rejects_malformed_body(db):
    with make_client(FakeScraper(), db) as client:
        resp = client.post(
            "/api/scrape/xgstats", content="not json", headers={"Content-Type": "application/json"}
        )
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request body"


def test_render_failure_is_a_server_error(db):
    scraper = FakeScraper(error=NavigationError("navigation to https://xgstat.com/x failed"))
    with make_client(scraper, db) as client:
        resp = client.post("/api/scrape/xgstats", json={"url": "https://xgstat.com/x"})
    assert resp.status_code == 500
    assert "navigation" in resp.json()["error"]


def test_save_failure_is_reported(full_match_html, db, monkeypatch):
    def broken_save(db, fixture):
        raise RepositoryError("disk full")

    monkeypatch.setattr("xgstats.api.endpoints.fixtures.save_fixture", broken_save)
    with make_client(FakeScraper(full_match_html), db) as client:
        resp = client.post("/api/scrape/xgstats", json={"url": MATCH_URL})
    assert resp.status_code == 500
    assert resp.json()["error"] == "Failed to save data: disk full"


def test_scrape_without_persistence(full_match_html):
    with make_client(FakeScraper(full_match_html), persist=False) as client:
        resp = client.post("/api/scrape/xgstats", json={"url": MATCH_URL})
        assert resp.status_code == 200
        lookup = client.get("/api/xgstats", params={"id": "4821"})
    assert lookup.status_code == 503


@pytest.mark.parametrize(
    "params, error",
    [
        ({}, "Fixture ID is required"),
        ({"id": ""}, "Fixture ID is required"),
        ({"id": "abc"}, "Invalid fixture ID"),
    ],
)
def test_lookup_validates_id(db, params, error):
    with make_client(FakeScraper(), db) as client:
        resp = client.get("/api/xgstats", params=params)
    assert resp.status_code == 400
    assert resp.json()["error"] == error


def test_lookup_unknown_fixture(db):
    with make_client(FakeScraper(), db) as client:
        resp = client.get("/api/xgstats", params={"id": "12345"})
    assert resp.status_code == 404
    body = resp.json()
    assert body["success"] is False
    assert body["data"] is None
    assert body["error"] == "Fixture not found"
