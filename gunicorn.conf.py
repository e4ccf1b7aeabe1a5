"""Gunicorn config for the Deal Flow API (gunicorn -c gunicorn.conf.py dealflow.main:app)."""
import os

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Uvicorn async workers: each loads its own copy of the deal snapshot at startup.
# The snapshot is read-only, so workers never need to coordinate. Tune via WEB_CONCURRENCY.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

# Excel report generation is the slowest request
timeout = 60

# Graceful timeout for shutdown
graceful_timeout = 30

# Keep-alive: must exceed the proxy keep-alive (default 60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
