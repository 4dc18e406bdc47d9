# team_service/main.py
from contextlib import asynccontextmanager

import uvicorn

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from team_service.api import routes_players, routes_teams
from team_service.core.config import settings
from team_service.core.logs import setup_logging
from team_service.db.engine import engine
from team_service.db.session import init_store
from team_service.middleware.request_log import RequestLogMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    settings.validate_at_startup()
    # teams/players must exist before the first request
    init_store(engine, create_tables=settings.CREATE_TABLES_ON_STARTUP)
    logger.info("{} started (env={})", settings.APP_NAME, settings.APP_ENV)
    yield
    engine.dispose()
    logger.info("{} stopped", settings.APP_NAME)


def create_app(use_lifespan: bool = True) -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan if use_lifespan else None)
    app.add_middleware(RequestLogMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )

    # Routers
    app.include_router(routes_players.router)
    app.include_router(routes_teams.router)

    @app.get("/health")
    def health():
        return {"ok": True, "env": settings.APP_ENV}

    return app


app = create_app()


def main():
    uvicorn.run(
        "team_service.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
