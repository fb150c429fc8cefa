# app.py
from flask import Flask, jsonify, request, g
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix
from config import Config
from routes.pages import pages_bp
from routes.verses import verses_bp
from utils.quran_api import QuranApiClient
from utils.session_store import BrowserStore
import logging
import time
import sys

# Configure logging to output to stdout
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

def create_app(config_class=Config, client=None):
    """Build the Flask app. Tests pass their own config or API client."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Use ProxyFix to handle proxy headers properly
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    app.json.sort_keys = False  # Preserve order of keys in JSON responses

    CORS(app, resources={
        r"/api/*": {
            "origins": "*",
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type"],
            "supports_credentials": True
        }
    })

    # Ensure URLs with or without trailing slashes are handled the same way
    app.url_map.strict_slashes = False

    if client is None:
        logger.info(f"Using verse API at {app.config['QURAN_API_BASE_URL']}")
        client = QuranApiClient.from_config(app.config)
    app.extensions['browser_store'] = BrowserStore(client, max_sessions=app.config['MAX_BROWSER_SESSIONS'])

    app.register_blueprint(pages_bp)
    app.register_blueprint(verses_bp, url_prefix='/api/verses')

    @app.before_request
    def before_request():
        g.start_time = time.time()

    @app.after_request
    def after_request(response):
        # Log request duration
        duration = time.time() - g.get('start_time', time.time())
        logger.info(f"Request to {request.path} took {duration:.2f} seconds")
        return response

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({
            'status': 'healthy',
            'sessions': len(app.extensions['browser_store']),
            'timestamp': time.time()
        })

    return app

app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=Config.PORT)
