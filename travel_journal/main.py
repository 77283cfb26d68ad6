import logging
from logging.handlers import RotatingFileHandler
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from travel_journal.core.config import (
    CORS_ORIGINS,
    LOG_FILE,
    LOG_LEVEL,
    SESSION_COOKIE_NAME,
)
from travel_journal.core.database import engine, Base
from travel_journal.core.errors import MSG_INVALID_REQUEST, MSG_INTERNAL, TravelJournalError
from travel_journal.core.route_guard import redirect_target
from travel_journal.services.auth import decode_access_token
from travel_journal.api.routers import auth, pages, trips

# Importing the ORM models registers their tables on Base.metadata
import travel_journal.models.sql  # noqa: F401

# Configure Logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("travel_journal")
handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
handler.setFormatter(formatter)
logger.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized.")
    yield


app = FastAPI(title="Travel Journal API", lifespan=lifespan)

# Mount routers; API routers first so /api/* never falls through to a page
app.include_router(auth.router)
app.include_router(trips.router)
app.include_router(pages.router)


@app.middleware("http")
async def route_guard(request: Request, call_next):
    token = request.cookies.get(SESSION_COOKIE_NAME)
    target = redirect_target(
        request.url.path, decode_access_token(token) is not None
    )
    if target is not None:
        logger.debug(f"Route guard redirect {request.url.path} -> {target}")
        return RedirectResponse(url=target, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    return await call_next(request)


app.add_middleware(
    CORSMiddleware,  # type: ignore
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TravelJournalError)
async def travel_journal_error_handler(request: Request, exc: TravelJournalError):
    if exc.http_status >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(
            f"{request.method} {request.url.path} -> {exc.http_status}: {exc.message}"
        )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": MSG_INVALID_REQUEST},
    )


@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": MSG_INTERNAL},
    )


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
