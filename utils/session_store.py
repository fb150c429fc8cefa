# utils/session_store.py
import logging
import threading
import uuid
from collections import OrderedDict

from utils.verse_browser import VerseBrowser

logger = logging.getLogger(__name__)

# Note: in-memory only, restarts reset every reader's window.
class BrowserStore:
    """Keeps one VerseBrowser per session id, evicting the least recently used"""

    def __init__(self, client, max_sessions=1000):
        self.client = client
        self.max_sessions = max_sessions
        self._browsers = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def new_session_id():
        return uuid.uuid4().hex

    def get(self, session_id) -> VerseBrowser:
        with self._lock:
            browser = self._browsers.get(session_id)
            if browser is None:
                browser = VerseBrowser(self.client)
                self._browsers[session_id] = browser
                if len(self._browsers) > self.max_sessions:
                    evicted, _ = self._browsers.popitem(last=False)
                    logger.info(f"Evicted browser session {evicted}")
            else:
                self._browsers.move_to_end(session_id)
            return browser

    def __len__(self):
        with self._lock:
            return len(self._browsers)
