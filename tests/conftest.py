"""
Shared fixtures: a fake requests session serving canned quran.com payloads.
"""
import pytest
import requests

from utils.quran_api import QuranApiClient

BASE_URL = "https://api.test/api/v4"


def verse_payload(key, text=None, translation="Allah - there is no deity except Him[1]"):
    verse = {"verse_key": key, "text_uthmani": text or f"arabic {key}"}
    verse["translations"] = [{"text": translation}] if translation is not None else []
    return {"verse": verse}


def chapter_payload(chapter_id, verses_count, name="Al-Baqarah"):
    return {"chapter": {"id": chapter_id, "name_simple": name, "verses_count": verses_count}}


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Maps request paths to (status, payload) pairs or exceptions to raise."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, path, payload=None, status=200):
        self.routes[path] = (status, payload)

    def fail(self, path, exc):
        self.routes[path] = exc

    def get(self, url, params=None, timeout=None):
        path = url[len(BASE_URL):]
        self.calls.append((path, params))
        route = self.routes.get(path)
        if route is None:
            return FakeResponse(404, {"error": "not found"})
        if isinstance(route, Exception):
            raise route
        status, payload = route
        return FakeResponse(status, payload)

    def paths(self):
        return [path for path, _ in self.calls]


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def client(fake_session):
    return QuranApiClient(BASE_URL, translation_id=20, timeout=5, session=fake_session)


@pytest.fixture
def ayat_al_kursi(fake_session):
    """Random verse 2:255 in a 286-verse chapter with both neighbours available."""
    fake_session.add("/verses/random", verse_payload("2:255"))
    fake_session.add("/chapters/2", chapter_payload(2, 286))
    for key in ("2:254", "2:255", "2:256"):
        fake_session.add(f"/verses/by_key/{key}", verse_payload(key))
    return fake_session
