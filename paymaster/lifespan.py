from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncContextManager

from fastapi import FastAPI

from paymaster.config import Settings, get_settings
from paymaster.tax.dispatch import list_jurisdiction_adapters

Hook = Callable[[FastAPI], Awaitable[None] | None]

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _open_file_sink(logger: logging.Logger, settings: Settings, app_label: str) -> logging.Handler | None:
    if not settings.file_logging:
        return None
    logs_dir = Path(settings.log_dir)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to create logs directory %s: %s", logs_dir, exc)
        return None
    handler = logging.FileHandler(logs_dir / f"{app_label}.log", encoding="utf-8")
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    return handler


async def _invoke_hook(hook: Hook | None, app: FastAPI) -> None:
    if hook is None:
        return
    result = hook(app)
    if inspect.isawaitable(result):
        await result  # type: ignore[func-returns-value]


def build_application_lifespan(
    app_label: str,
    *,
    startup_hook: Hook | None = None,
    shutdown_hook: Hook | None = None,
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    base_logger = logging.getLogger("paymaster")

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = get_settings()
        logger = base_logger.getChild(app_label)
        file_handler = _open_file_sink(base_logger, settings, app_label)
        tax_packs = {
            adapter.code: adapter.default_pack.period_label for adapter in list_jurisdiction_adapters()
        }

        app.state.settings = settings
        app.state.default_tax_packs = tax_packs
        app.state.log_handler = file_handler
        app.state.app_label = app_label

        logger.info("Startup complete: default_tax_packs=%s", tax_packs)

        try:
            await _invoke_hook(startup_hook, app)
            yield
        finally:
            await _invoke_hook(shutdown_hook, app)
            if file_handler is not None:
                base_logger.removeHandler(file_handler)
                file_handler.close()
            for attr in ("settings", "default_tax_packs", "log_handler", "app_label"):
                if hasattr(app.state, attr):
                    delattr(app.state, attr)
            logger.info("Shutdown complete")

    return _lifespan
