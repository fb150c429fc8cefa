# scripts/random_ayah.py
import sys
from pathlib import Path

# Add the parent directory to the Python path properly
current_dir = Path(__file__).resolve().parent
backend_dir = current_dir.parent
sys.path.insert(0, str(backend_dir))

from config import Config
from utils.quran_api import QuranApiClient
from utils.verse_browser import VerseBrowser

def print_cards(cards):
    for card in cards:
        marker = '>>' if card.selected else '  '
        print(f"{marker} [{card.header}] {card.label}")
        print(f"   {card.body}")
        print(f"   {card.footer}\n")

def main(argv=None, client=None):
    """Print a random ayah with its context, then page through the surah."""
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) > 2:
        print("Usage: python random_ayah.py [<previous_count> [<next_count>]]")
        return 1

    try:
        previous_count = int(argv[0]) if len(argv) > 0 else 0
        next_count = int(argv[1]) if len(argv) > 1 else 0
    except ValueError:
        print("Counts must be whole numbers")
        return 1

    if client is None:
        client = QuranApiClient(
            base_url=Config.QURAN_API_BASE_URL,
            translation_id=Config.TRANSLATION_ID,
            text_field=Config.VERSE_TEXT_FIELD,
            timeout=Config.REQUEST_TIMEOUT,
            max_workers=Config.MAX_CONCURRENT_REQUESTS,
        )
    browser = VerseBrowser(client)

    if not browser.generate():
        print(browser.error)
        return 1

    for _ in range(previous_count):
        if browser.extend_backward() is None:
            break
    for _ in range(next_count):
        if browser.extend_forward() is None:
            break

    state = browser.state
    print(f"{state.chapter_name} ({state.chapter_id}), verses {state.window_start}-{state.window_end} of {state.total_verses}\n")
    print_cards(browser.cards)
    return 0

if __name__ == '__main__':
    sys.exit(main())
