# routes/pages.py
from flask import Blueprint, redirect, render_template, url_for
from routes.verses import get_browser
import logging

pages_bp = Blueprint('pages', __name__)
logger = logging.getLogger(__name__)

def _back_to_page(browser):
    # The anchor scrolls the page to the selected verse or the reader's last position
    return redirect(url_for('pages.index', _anchor=browser.focus) if browser.focus else url_for('pages.index'))

@pages_bp.route('/', methods=['GET'])
def index():
    return render_template('index.html', snapshot=get_browser().snapshot())

@pages_bp.route('/generate', methods=['POST'])
def generate():
    browser = get_browser()
    browser.generate()
    return _back_to_page(browser)

@pages_bp.route('/previous', methods=['POST'])
def previous():
    browser = get_browser()
    browser.extend_backward()
    return _back_to_page(browser)

@pages_bp.route('/next', methods=['POST'])
def next_verse():
    browser = get_browser()
    browser.extend_forward()
    return _back_to_page(browser)
