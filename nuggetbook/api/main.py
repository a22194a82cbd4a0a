# nuggetbook/api/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from nuggetbook import config, __version__
from nuggetbook.errors import (
    AuthRequiredError, DataAccessError, DuplicateError, MetadataLookupError, NotFoundError
)
from nuggetbook.sa.database import get_database
from nuggetbook.api.routes import auth, books, nuggets, shares, lookup, profile

logger = logging.getLogger(__name__)

def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(DuplicateError)
    async def duplicate(request: Request, exc: DuplicateError):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc), "code": "duplicate"}
        )

    @app.exception_handler(AuthRequiredError)
    async def auth_required(request: Request, exc: AuthRequiredError):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": str(exc), "return_to": exc.return_to},
            headers={"WWW-Authenticate": "Bearer"}
        )

    @app.exception_handler(ValueError)
    async def bad_request(request: Request, exc: ValueError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    @app.exception_handler(MetadataLookupError)
    async def lookup_failed(request: Request, exc: MetadataLookupError):
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": str(exc), "upstream_status": exc.status_code}
        )

    @app.exception_handler(DataAccessError)
    async def data_access_failed(request: Request, exc: DataAccessError):
        logger.error("Data access error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize database on startup
    logging.basicConfig(level=getattr(logging, config.log_level_name(), logging.INFO))
    get_database().init_db()
    yield

def create_app() -> FastAPI:
    app = FastAPI(title="Nuggetbook API", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    register_error_handlers(app)
    for module in (auth, books, nuggets, shares, lookup, profile):
        app.include_router(module.router)
    return app

app = create_app()
