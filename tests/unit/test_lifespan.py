from fastapi import FastAPI
from fastapi.testclient import TestClient

from paymaster.config import get_settings
from paymaster.lifespan import build_application_lifespan


def test_lifespan_sets_and_clears_state(monkeypatch, tmp_path):
    get_settings.cache_clear()
    monkeypatch.setenv("PAYROLL_FILE_LOGGING", "true")
    monkeypatch.setenv("PAYROLL_LOG_DIR", str(tmp_path / "logs"))
    calls = []

    async def on_start(app):
        calls.append(("start", app.state.app_label))

    def on_stop(app):
        calls.append(("stop", app.state.app_label))

    app = FastAPI(lifespan=build_application_lifespan("worker", startup_hook=on_start, shutdown_hook=on_stop))
    with TestClient(app):
        assert app.state.default_tax_packs == {"NA": "2025-03", "ZA": "2025-03"}
        assert app.state.log_handler is not None
        assert app.state.settings.file_logging is True

    assert calls == [("start", "worker"), ("stop", "worker")]
    assert not hasattr(app.state, "log_handler")
    assert (tmp_path / "logs" / "worker.log").exists()
    get_settings.cache_clear()


def test_lifespan_without_file_logging(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.delenv("PAYROLL_FILE_LOGGING", raising=False)
    app = FastAPI(lifespan=build_application_lifespan("quiet"))
    with TestClient(app):
        assert app.state.log_handler is None
    get_settings.cache_clear()
