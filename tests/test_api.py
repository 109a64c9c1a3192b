import json

import pytest
from fastapi.testclient import TestClient

from scheme_scraper.api import create_app

HTML = "<div><p class='n'>one</p><p class='n'>two</p></div>"
SCHEME = {"type": "LIST", "path": "div", "element_scheme": {"type": "STRING", "path": "p.n"}}


@pytest.fixture
def client(tmp_path):
    return TestClient(create_app(str(tmp_path / "missing.yaml")))


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_scrape_with_object_instructions(client):
    resp = client.post("/scrape", json={"content": HTML, "instructions": SCHEME})
    assert resp.status_code == 200
    assert resp.json() == ["one", "two"]


def test_scrape_with_text_instructions(client):
    resp = client.post("/scrape", json={"content": HTML, "instructions": json.dumps(SCHEME)})
    assert resp.json() == ["one", "two"]


def test_scrape_error_payload(client):
    resp = client.post("/scrape", json={"content": HTML, "instructions": {"type": "STRING", "path": "p["}})
    assert resp.status_code == 422
    assert resp.json() == {"error": "'p[' is not a valid path."}


def test_relativize(client):
    scheme = {"type": "LIST", "path": "div", "element_scheme": {"type": "STRING", "path": "div > p.n"}}
    resp = client.post("/relativize", json={"scheme": scheme})
    assert resp.status_code == 200
    assert resp.json()["element_scheme"] == {"type": "STRING", "path": "p.n", "mode": "INNER_HTML"}


def test_relativize_rejects_bad_scheme(client):
    resp = client.post("/relativize", json={"scheme": {"type": "TABLE"}})
    assert resp.status_code == 422
    assert resp.json()["error"].startswith("couldn't decipher instructions")
