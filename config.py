# config.py
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv()

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')  # In production, set a proper secret key

    # quran.com API
    QURAN_API_BASE_URL = os.getenv('QURAN_API_BASE_URL', 'https://api.quran.com/api/v4')
    TRANSLATION_ID = int(os.getenv('TRANSLATION_ID', '20'))  # Sahih International
    VERSE_TEXT_FIELD = os.getenv('VERSE_TEXT_FIELD', 'text_uthmani')
    REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '10'))
    MAX_CONCURRENT_REQUESTS = int(os.getenv('MAX_CONCURRENT_REQUESTS', '3'))

    # Browsers live in process memory, one per visitor session
    MAX_BROWSER_SESSIONS = int(os.getenv('MAX_BROWSER_SESSIONS', '1000'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    PORT = int(os.getenv('PORT', '8080'))
