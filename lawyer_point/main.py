# lawyer_point/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import make_url

from .config import Settings, get_settings
from .db import init_db, make_engine
from .routers import (
    appointments_routes,
    auth_routes,
    lawyers_routes,
    payments_routes,
    reserves_routes,
    users_routes,
)
from .services.payments import PaymentGateway, StripeGateway

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(app.state.engine)
    url = make_url(app.state.settings.database_url)
    logger.info("Lawyer Point started on %s", url.render_as_string(hide_password=True))
    yield
    app.state.engine.dispose()


def create_app(
    settings: Optional[Settings] = None,
    payment_gateway: Optional[PaymentGateway] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Lawyer Point", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = make_engine(settings.database_url)
    app.state.payment_gateway = payment_gateway or StripeGateway(
        settings.stripe_secret_key, currency=settings.payment_currency
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(appointments_routes.router)
    app.include_router(auth_routes.router)
    app.include_router(users_routes.router)
    app.include_router(reserves_routes.router)
    app.include_router(payments_routes.router)
    app.include_router(lawyers_routes.router)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Lawyer Point server is running"

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
