"""
Tests for the gunicorn configuration file.
"""
import runpy
from pathlib import Path

CONF = Path(__file__).resolve().parent.parent / "gunicorn.conf.py"


class TestGunicornConf:
    def test_points_at_application(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        conf = runpy.run_path(str(CONF))
        assert conf["wsgi_app"] == "problemkit.main:app"
        assert conf["worker_class"] == "uvicorn.workers.UvicornWorker"
        assert conf["loglevel"] == "info"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("WORKERS", "4")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        conf = runpy.run_path(str(CONF))
        assert conf["bind"] == "0.0.0.0:9000"
        assert conf["workers"] == 4
        assert conf["loglevel"] == "warning"
