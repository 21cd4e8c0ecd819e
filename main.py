import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from config import settings
from api.v1.router import api_router
from core.errors import ServiceError
from services.db import Database

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(database_url: str | None = None) -> FastAPI:
    db = Database(database_url or settings.database_url, echo=settings.db_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await db.connect()
        app.state.db = db
        try:
            yield
        finally:
            await db.close()

    app = FastAPI(title="Fitlife API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ServiceError)
    async def _service_error(request: Request, exc: ServiceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        if not errors:
            return JSONResponse(status_code=400, content={"error": "Invalid request"})
        first = errors[0]
        # drop the "body"/"query" prefix, keep the field path
        loc = [str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path")]
        msg = first.get("msg", "Invalid value")
        return JSONResponse(
            status_code=400,
            content={"error": f"{'.'.join(loc)}: {msg}" if loc else msg},
        )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health", tags=["meta"])
    def health() -> dict[str, str]:
        return {"status": "ok", "env": settings.env_name}

    return app


app = create_app()
