# routes/verses.py
from flask import Blueprint, current_app, jsonify, session
from werkzeug.exceptions import HTTPException
import logging

verses_bp = Blueprint('verses', __name__)
logger = logging.getLogger(__name__)

def get_browser():
    """Return the VerseBrowser for the current session, creating one if needed"""
    store = current_app.extensions['browser_store']
    session_id = session.get('browser_id')
    if not session_id:
        session_id = store.new_session_id()
        session['browser_id'] = session_id
    return store.get(session_id)

@verses_bp.route('/', methods=['GET'])
def get_snapshot():
    return jsonify(get_browser().snapshot().model_dump())

@verses_bp.route('/generate', methods=['POST'])
def generate():
    browser = get_browser()
    ok = browser.generate()
    snapshot = browser.snapshot().model_dump()
    if not ok and browser.error:
        return jsonify({'error': browser.error, 'snapshot': snapshot}), 502
    return jsonify(snapshot)

@verses_bp.route('/previous', methods=['POST'])
def previous():
    browser = get_browser()
    card = browser.extend_backward()
    return jsonify({
        'card': card.model_dump() if card else None,
        'snapshot': browser.snapshot().model_dump()
    })

@verses_bp.route('/next', methods=['POST'])
def next_verse():
    browser = get_browser()
    card = browser.extend_forward()
    return jsonify({
        'card': card.model_dump() if card else None,
        'snapshot': browser.snapshot().model_dump()
    })

@verses_bp.errorhandler(Exception)
def handle_error(e):
    if isinstance(e, HTTPException):
        return e
    logger.error(f"Unhandled error in verses API: {str(e)}", exc_info=True)
    return jsonify({'error': str(e)}), 500
