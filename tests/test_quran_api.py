import pytest
import requests

from utils.quran_api import QuranApiClient, ServiceError
from tests.conftest import BASE_URL, chapter_payload, verse_payload


def test_random_verse_sends_translation_and_field(client, fake_session):
    fake_session.add("/verses/random", verse_payload("2:255"))
    verse = client.get_random_verse()
    assert verse.key == "2:255"
    assert fake_session.calls == [("/verses/random", {"translations": 20, "fields": "text_uthmani"})]


def test_random_verse_non_success_raises(client, fake_session):
    fake_session.add("/verses/random", {"error": "boom"}, status=500)
    with pytest.raises(ServiceError) as exc_info:
        client.get_random_verse()
    assert exc_info.value.status_code == 500


def test_random_verse_network_error_raises(client, fake_session):
    fake_session.fail("/verses/random", requests.ConnectionError("offline"))
    with pytest.raises(ServiceError):
        client.get_random_verse()


def test_random_verse_malformed_body_raises(client, fake_session):
    fake_session.add("/verses/random", {"unexpected": True})
    with pytest.raises(ServiceError):
        client.get_random_verse()


def test_chapter_info(client, fake_session):
    fake_session.add("/chapters/2", chapter_payload(2, 286))
    chapter = client.get_chapter_info(2)
    assert chapter.name == "Al-Baqarah"
    assert chapter.verses_count == 286


def test_chapter_info_failure_raises(client, fake_session):
    fake_session.add("/chapters/2", None, status=503)
    with pytest.raises(ServiceError):
        client.get_chapter_info(2)


def test_verse_by_key_absent_on_failure(client, fake_session):
    fake_session.add("/verses/by_key/2:254", None, status=500)
    fake_session.fail("/verses/by_key/2:256", requests.Timeout("slow"))
    assert client.get_verse_by_key("2:254") is None
    assert client.get_verse_by_key("2:256") is None
    assert client.get_verse_by_key("2:999") is None


def test_verses_by_keys_drops_failures(client, fake_session):
    fake_session.add("/verses/by_key/2:255", verse_payload("2:255"))
    fake_session.add("/verses/by_key/2:256", verse_payload("2:256"))
    fake_session.add("/verses/by_key/2:254", None, status=500)
    verses = client.get_verses_by_keys(["2:254", "2:255", "2:256"])
    assert sorted(v.verse_number for v in verses) == [255, 256]
    assert sorted(fake_session.paths()) == [
        "/verses/by_key/2:254", "/verses/by_key/2:255", "/verses/by_key/2:256"
    ]


def test_verses_by_keys_empty(client, fake_session):
    assert client.get_verses_by_keys([]) == []
    assert fake_session.calls == []


def test_from_config_strips_trailing_slash(fake_session):
    config = {
        "QURAN_API_BASE_URL": BASE_URL + "/",
        "TRANSLATION_ID": 131,
        "VERSE_TEXT_FIELD": "text_uthmani",
        "REQUEST_TIMEOUT": 3,
        "MAX_CONCURRENT_REQUESTS": 2,
    }
    api = QuranApiClient.from_config(config, session=fake_session)
    assert api.base_url == BASE_URL
    assert api.translation_id == 131


def test_verse_by_key_non_object_translation_is_absent(client, fake_session):
    payload = verse_payload("2:254")
    payload["verse"]["translations"] = ["not-an-object"]
    fake_session.add("/verses/by_key/2:254", payload)
    fake_session.add("/verses/by_key/2:255", verse_payload("2:255"))

    assert client.get_verse_by_key("2:254") is None
    verses = client.get_verses_by_keys(["2:254", "2:255"])
    assert [v.key for v in verses] == ["2:255"]


def test_random_verse_non_object_translation_raises(client, fake_session):
    payload = verse_payload("2:255")
    payload["verse"]["translations"] = [42]
    fake_session.add("/verses/random", payload)
    with pytest.raises(ServiceError):
        client.get_random_verse()
