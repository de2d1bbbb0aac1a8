"""
Gunicorn configuration for the problemkit API.

Env vars that override defaults:
  PORT       — TCP port to bind
  WORKERS    — number of worker processes (default: 2)
  LOG_LEVEL  — shared with problemkit.core.config.Settings

Application records (including the problem channel) go through
problemkit.core.logging; gunicorn only adds its own error and access logs.
"""
import os

wsgi_app = "problemkit.main:app"

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

workers = int(os.environ.get("WORKERS", "2"))

# ASGI app, so every worker runs a Uvicorn event loop.
worker_class = "uvicorn.workers.UvicornWorker"

keepalive = 5
timeout = 120
graceful_timeout = 30

loglevel = os.environ.get("LOG_LEVEL", "info").lower()
errorlog = "-"
# Error responses are already logged once by the problem channel; the access
# log only records the status line.
accesslog = "-"
access_log_format = '%(h)s "%(r)s" %(s)s %(b)sB %(D)sµs'
