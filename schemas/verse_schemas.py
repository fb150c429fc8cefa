from pydantic import BaseModel
from typing import List, Optional

class VerseCard(BaseModel):
    verse_key: str
    anchor: str
    header: str
    label: str
    body: str
    footer: str
    selected: bool = False

    @property
    def css_class(self) -> str:
        return 'main-verse' if self.selected else 'context-verse'

class ControlsState(BaseModel):
    visible: bool = False
    previous_enabled: bool = False
    next_enabled: bool = False

class BrowseSnapshot(BaseModel):
    chapter_id: Optional[int] = None
    chapter_name: str = ''
    total_verses: int = 0
    window_start: int = 0
    window_end: int = 0
    selected_key: Optional[str] = None
    cards: List[VerseCard] = []
    controls: ControlsState = ControlsState()
    error: Optional[str] = None
    focus: Optional[str] = None  # Anchor the page should scroll to
