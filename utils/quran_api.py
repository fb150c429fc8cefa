# utils/quran_api.py
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import requests

from models.verse import ChapterInfo, Verse

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Raised when the verse-data service cannot answer a required request"""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class QuranApiClient:
    """
    Thin client for the quran.com v4 REST API.

    Only three resources are used: a random verse, chapter metadata and
    verse lookup by key. The random verse and chapter calls raise
    ServiceError on failure; lookups by key are best-effort and return None.
    """

    def __init__(self, base_url, translation_id=20, text_field='text_uthmani',
                 timeout=10, max_workers=3, session=None):
        self.base_url = base_url.rstrip('/')
        self.translation_id = translation_id
        self.text_field = text_field
        self.timeout = timeout
        self.max_workers = max_workers
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config, session=None):
        return cls(
            base_url=config['QURAN_API_BASE_URL'],
            translation_id=config['TRANSLATION_ID'],
            text_field=config['VERSE_TEXT_FIELD'],
            timeout=config['REQUEST_TIMEOUT'],
            max_workers=config['MAX_CONCURRENT_REQUESTS'],
            session=session,
        )

    @property
    def _verse_params(self):
        return {'translations': self.translation_id, 'fields': self.text_field}

    def _get_json(self, path, params=None):
        """GET a resource and return the decoded body, raising ServiceError on any failure"""
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise ServiceError(f"Request to {url} failed with status {status}", status_code=status) from e
        except requests.RequestException as e:
            raise ServiceError(f"Request to {url} failed: {str(e)}") from e
        except ValueError as e:
            raise ServiceError(f"Invalid JSON from {url}") from e

    def get_random_verse(self) -> Verse:
        data = self._get_json('/verses/random', params=self._verse_params)
        try:
            return Verse.from_api(data['verse'], self.text_field)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ServiceError(f"Malformed random verse response: {str(e)}") from e

    def get_chapter_info(self, chapter_id) -> ChapterInfo:
        data = self._get_json(f'/chapters/{chapter_id}')
        try:
            return ChapterInfo.from_api(data['chapter'])
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ServiceError(f"Malformed chapter response for {chapter_id}: {str(e)}") from e

    def get_verse_by_key(self, key) -> Optional[Verse]:
        """Fetch one verse, returning None instead of raising when it cannot be loaded"""
        try:
            data = self._get_json(f'/verses/by_key/{key}', params=self._verse_params)
            return Verse.from_api(data['verse'], self.text_field)
        except ServiceError as e:
            logger.warning(f"Verse {key} unavailable: {e.message}")
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Malformed verse response for {key}: {str(e)}")
        return None

    def get_verses_by_keys(self, keys) -> List[Verse]:
        """Fetch several verses concurrently and drop the ones that failed"""
        keys = list(keys)
        if not keys:
            return []
        workers = max(1, min(self.max_workers, len(keys)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(self.get_verse_by_key, keys))
        verses = [v for v in results if v is not None]
        logger.info(f"Fetched {len(verses)} of {len(keys)} verses")
        return verses
