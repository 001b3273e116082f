# app/main.py
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .catalog import catalog_router
from .config import Settings, get_settings


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    app = FastAPI(
        title="Book Search Aggregator",
        description=(
            "Microservice qui interroge Google Books et ne renvoie que "
            "des livres aux métadonnées complètes."
        ),
        version="1.0.0",
    )
    app.state.settings = settings or get_settings()

    # 🔹 Route de base pour tester rapidement
    @app.get("/ping", response_class=PlainTextResponse)
    def ping():
        return "pong"

    app.include_router(catalog_router)
    return app
