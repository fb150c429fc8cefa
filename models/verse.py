# models/verse.py
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


def verse_key(chapter_id: int, verse_number: int) -> str:
    return f"{chapter_id}:{verse_number}"


def parse_verse_key(key: str) -> Tuple[int, int]:
    """Parse a key like '2:255' into (chapter_id, verse_number)"""
    chapter, verse = key.split(':', 1)
    return int(chapter), int(verse)


def context_keys(chapter_id: int, verse_number: int, total_verses: int) -> List[str]:
    """Keys for a verse and its immediate neighbours within the chapter"""
    keys = []
    if verse_number > 1:
        keys.append(verse_key(chapter_id, verse_number - 1))
    keys.append(verse_key(chapter_id, verse_number))
    if verse_number < total_verses:
        keys.append(verse_key(chapter_id, verse_number + 1))
    return keys


@dataclass(frozen=True)
class Verse:
    chapter_id: int
    verse_number: int
    text: str
    translation: Optional[str] = None

    @property
    def key(self) -> str:
        return verse_key(self.chapter_id, self.verse_number)

    @classmethod
    def from_api(cls, data: Dict[str, Any], text_field: str = 'text_uthmani') -> 'Verse':
        """Build a Verse from the `verse` object of a quran.com response"""
        chapter_id, verse_number = parse_verse_key(data['verse_key'])
        translations = data.get('translations') or []
        translation = translations[0].get('text') if translations else None
        return cls(
            chapter_id=chapter_id,
            verse_number=verse_number,
            text=data.get(text_field) or '',
            translation=translation,
        )


@dataclass(frozen=True)
class ChapterInfo:
    id: int
    name: str
    verses_count: int

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'ChapterInfo':
        return cls(
            id=int(data['id']),
            name=data.get('name_simple', ''),
            verses_count=int(data['verses_count']),
        )


@dataclass(frozen=True)
class BrowseState:
    """
    Pagination state for one browser. Replaced, never mutated: each
    successful operation produces a new value.
    """
    chapter_id: Optional[int] = None
    chapter_name: str = ''
    total_verses: int = 0
    window_start: int = 0
    window_end: int = 0
    selected_key: Optional[str] = None

    @property
    def loaded(self) -> bool:
        return self.chapter_id is not None and self.window_start >= 1

    @property
    def can_extend_backward(self) -> bool:
        return self.loaded and self.window_start > 1

    @property
    def can_extend_forward(self) -> bool:
        return self.loaded and self.window_end < self.total_verses

    def to_dict(self) -> Dict[str, Any]:
        return {
            'chapter_id': self.chapter_id,
            'chapter_name': self.chapter_name,
            'total_verses': self.total_verses,
            'window_start': self.window_start,
            'window_end': self.window_end,
            'selected_key': self.selected_key,
        }
