# utils/render.py
import re
from models.verse import Verse
from schemas.verse_schemas import VerseCard

TRANSLATION_PLACEHOLDER = 'Translation unavailable'

_SUP_RE = re.compile(r'<sup.*?</sup>', re.DOTALL)
_CITATION_RE = re.compile(r'\[\d+\]')
_TAG_RE = re.compile(r'<[^>]+>')

def remove_footnotes(text):
    """Strip <sup> annotation spans and bracketed numeric citation markers"""
    # Repeat until stable, a removal can expose a new marker ('[[1]2]')
    while True:
        cleaned = _CITATION_RE.sub('', _SUP_RE.sub('', text))
        if cleaned == text:
            return cleaned
        text = cleaned

def strip_tags(text):
    """Drop any markup left in a translation, keeping the text between tags"""
    return _TAG_RE.sub('', text)

def card_anchor(verse_key):
    return 'verse-' + verse_key.replace(':', '-')

def render_card(verse: Verse, chapter_name: str, is_selected: bool) -> VerseCard:
    translation = verse.translation if verse.translation is not None else TRANSLATION_PLACEHOLDER
    return VerseCard(
        verse_key=verse.key,
        anchor=card_anchor(verse.key),
        header=f"{chapter_name} {verse.key}",
        label='Selected Ayah' if is_selected else 'Context',
        body=verse.text,
        footer=strip_tags(remove_footnotes(translation)),
        selected=is_selected,
    )
