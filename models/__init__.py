# This file makes the models directory a Python package
from .verse import BrowseState, ChapterInfo, Verse, context_keys, parse_verse_key, verse_key

__all__ = [
    'BrowseState',
    'ChapterInfo',
    'Verse',
    'context_keys',
    'parse_verse_key',
    'verse_key',
]
