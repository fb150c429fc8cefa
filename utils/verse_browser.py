# utils/verse_browser.py
import logging
import threading
from contextlib import contextmanager
from dataclasses import replace
from typing import List, Optional

from models.verse import BrowseState, context_keys, verse_key
from schemas.verse_schemas import BrowseSnapshot, ControlsState, VerseCard
from utils.quran_api import ServiceError
from utils.render import card_anchor, render_card

logger = logging.getLogger(__name__)

GENERATE_ERROR_MESSAGE = 'Failed to fetch content. Please check your internet connection and try again.'


class VerseBrowser:
    """
    Holds the pagination state and displayed cards for one reader.

    generate() loads a random verse with its neighbours; extend_backward()
    and extend_forward() grow the window one verse at a time. Only one
    operation runs at a time: a call made while another is pending is
    ignored, the same as pressing a disabled button.
    """

    def __init__(self, client, state: Optional[BrowseState] = None):
        self.client = client
        self.state = state or BrowseState()
        self.cards: List[VerseCard] = []
        self.error: Optional[str] = None
        self.focus: Optional[str] = None
        self.in_flight: Optional[str] = None
        self.controls_visible = False
        self._guard = threading.Lock()

    @contextmanager
    def _operation(self, name):
        if not self._guard.acquire(blocking=False):
            logger.info(f"Ignoring '{name}', '{self.in_flight}' is still in flight")
            yield False
            return
        self.in_flight = name
        try:
            yield True
        finally:
            self.in_flight = None
            self._guard.release()

    def generate(self) -> bool:
        """Load a random verse and its context. Returns False if the operation failed or was ignored."""
        with self._operation('generate') as allowed:
            if not allowed:
                return False

            self.cards = []
            self.error = None
            self.focus = None
            self.controls_visible = False

            try:
                main = self.client.get_random_verse()
                chapter = self.client.get_chapter_info(main.chapter_id)
                keys = context_keys(main.chapter_id, main.verse_number, chapter.verses_count)
                verses = self.client.get_verses_by_keys(keys)
            except ServiceError as e:
                logger.error(f"Error generating verses: {e.message}")
                self.error = GENERATE_ERROR_MESSAGE
                return False
            except Exception as e:
                logger.error(f"Error fetching context verses: {str(e)}", exc_info=True)
                self.error = GENERATE_ERROR_MESSAGE
                return False

            state = BrowseState(
                chapter_id=main.chapter_id,
                chapter_name=chapter.name,
                total_verses=chapter.verses_count,
                selected_key=main.key,
            )
            verses = sorted(
                (v for v in verses if v.chapter_id == main.chapter_id),
                key=lambda v: v.verse_number,
            )
            if verses:
                state = replace(
                    state,
                    window_start=verses[0].verse_number,
                    window_end=verses[-1].verse_number,
                )

            self.state = state
            self.cards = [render_card(v, state.chapter_name, v.key == main.key) for v in verses]
            self.focus = card_anchor(main.key)
            self.controls_visible = True
            logger.info(f"Generated {main.key} with window {state.window_start}-{state.window_end}")
            return True

    def extend_backward(self) -> Optional[VerseCard]:
        """Load the verse before the window and prepend it"""
        if not self.controls_visible or not self.state.can_extend_backward:
            return None
        with self._operation('previous') as allowed:
            if not allowed:
                return None
            # Another operation may have moved the window while this one waited
            if not self.controls_visible or not self.state.can_extend_backward:
                return None
            state = self.state
            target = state.window_start - 1
            card = self._load_card(verse_key(state.chapter_id, target))
            if card is None:
                return None
            previous_first = self.cards[0].anchor if self.cards else None
            self.cards.insert(0, card)
            self.state = replace(state, window_start=target)
            # Keep the reader on the content they were looking at
            self.focus = previous_first
            return card

    def extend_forward(self) -> Optional[VerseCard]:
        """Load the verse after the window and append it"""
        if not self.controls_visible or not self.state.can_extend_forward:
            return None
        with self._operation('next') as allowed:
            if not allowed:
                return None
            if not self.controls_visible or not self.state.can_extend_forward:
                return None
            state = self.state
            target = state.window_end + 1
            card = self._load_card(verse_key(state.chapter_id, target))
            if card is None:
                return None
            previous_last = self.cards[-1].anchor if self.cards else None
            self.cards.append(card)
            self.state = replace(state, window_end=target)
            self.focus = previous_last
            return card

    def _load_card(self, key) -> Optional[VerseCard]:
        # Paging failures are logged only, never shown to the reader
        try:
            verses = self.client.get_verses_by_keys([key])
        except Exception as e:
            logger.warning(f"Error loading verse {key}: {str(e)}")
            return None
        if not verses:
            logger.warning(f"Verse {key} could not be loaded")
            return None
        return render_card(verses[0], self.state.chapter_name, False)

    def controls(self) -> ControlsState:
        visible = self.controls_visible and self.in_flight is None
        return ControlsState(
            visible=visible,
            previous_enabled=visible and self.state.can_extend_backward,
            next_enabled=visible and self.state.can_extend_forward,
        )

    def snapshot(self) -> BrowseSnapshot:
        return BrowseSnapshot(
            **self.state.to_dict(),
            cards=list(self.cards),
            controls=self.controls(),
            error=self.error,
            focus=self.focus,
        )
