"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathlang.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pathlang_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Pathlang",
        description="Path mini-language parser — SVG path data plus figure shorthands, emitted as vector geometry",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all element modules to trigger registration
    _register_elements()

    from pathlang.api.router import api_router

    app.include_router(api_router)

    return app


def _register_elements() -> None:
    """Import all element modules so @path_element decorators fire."""
    import importlib
    import pkgutil

    from pathlang.engine.registry import get_registry

    package = importlib.import_module("pathlang.engine.elements")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"pathlang.engine.elements.{module_name}")

    missing = get_registry().missing_kinds()
    if missing:
        logger.warning("No element registered for: %s", ", ".join(k.value for k in missing))


app = create_app()
