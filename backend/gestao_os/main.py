import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gestao_os import __version__
from gestao_os.core.config import settings
from gestao_os.core.database import dispose_db, get_db, init_db
from gestao_os.routers import (
    auth_router,
    clientes_router,
    dashboard_router,
    ordens_router,
    recebimentos_router,
    relatorios_router,
)

logger = logging.getLogger("gestao_os.main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_db()
    yield
    dispose_db()


def create_app() -> FastAPI:
    logging.getLogger("gestao_os").setLevel(settings.log_level)

    app = FastAPI(
        title="Gestão de OS",
        version=__version__,
        debug=settings.app_env == "dev",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health() -> dict[str, str | bool]:
        return {"status": "ok", "authDisabled": settings.auth_disabled}

    @app.get("/db-check")
    def db_check(db: Session = Depends(get_db)) -> dict[str, str]:
        try:
            db.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.exception("Database connectivity check failed")
            raise HTTPException(status_code=500, detail="Database connection error") from exc
        return {"database": "ok"}

    app.include_router(auth_router)
    app.include_router(clientes_router)
    app.include_router(ordens_router)
    app.include_router(recebimentos_router)
    app.include_router(dashboard_router)
    app.include_router(relatorios_router)

    return app


app = create_app()
