# gunicorn.conf.py
import os
import logging
import sys

# Configure logging to stdout
accesslog = '-'
errorlog = '-'
loglevel = 'info'

# Get PORT from environment or use default
port = os.getenv('PORT', '8080')
bind = f"0.0.0.0:{port}"

# Reader windows are held in process memory, so every request for a
# session must reach the same process: one worker, several threads.
workers = 1
threads = int(os.getenv('GUNICORN_THREADS', '8'))
worker_class = "gthread"

# Log configuration on startup
def on_starting(server):
    logger = logging.getLogger('gunicorn.error')
    logger.setLevel(logging.INFO)
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.info(f"Starting gunicorn with {workers} worker and {threads} threads on port {port}")

timeout = 60
keepalive = 5

# Process naming
proc_name = "random_ayah"
default_proc_name = "random_ayah"

graceful_timeout = 30
