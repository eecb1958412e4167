from contextlib import asynccontextmanager
from fastapi import FastAPI

from presigner.core.config import get_settings
from presigner.core.logging import configure_logging
from presigner.services.issuer import get_issuer
from presigner.api.routers import presign as presign_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.url_issuer = get_issuer()
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)
    app = FastAPI(
        debug=settings.debug,
        title="Presigned URL Issuer",
        lifespan=lifespan,
    )

    app.include_router(presign_router.router)

    return app


app = create_app()
