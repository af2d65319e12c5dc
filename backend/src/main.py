import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from auth.interfaces.routes import router as auth_router
from images.interfaces.routes import router as images_router
from revisions.application.services import load_seed_data, seed_if_empty
from revisions.infrastructure.revision_repository import DbRevisionRepository
from revisions.interfaces.routes import router as revisions_router
from shared.config import settings
from shared.exceptions import (
    AppError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from shared.infrastructure.database import Database
from shared.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    await database.create_all()
    async with database.session() as session:
        await seed_if_empty(
            DbRevisionRepository(session),
            settings.DATAROOM_PAGE,
            load_seed_data(settings.SEED_DATA_PATH),
        )
    app.state.database = database
    logger.info("Data room API ready (page %r)", settings.DATAROOM_PAGE)
    yield
    await database.dispose()


app = FastAPI(
    title="Data Room",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(revisions_router)
app.include_router(images_router)


@app.exception_handler(NotFoundError)
async def not_found_handler(request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(ValidationError)
async def validation_handler(request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(ConflictError)
async def conflict_handler(request, exc: ConflictError):
    return JSONResponse(status_code=409, content={"detail": exc.message})


@app.exception_handler(AuthenticationError)
async def auth_error_handler(request, exc: AuthenticationError):
    return JSONResponse(status_code=401, content={"detail": exc.message})


@app.exception_handler(AuthorizationError)
async def authorization_error_handler(request, exc: AuthorizationError):
    return JSONResponse(status_code=403, content={"detail": exc.message})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.exception_handler(AppError)
async def app_error_handler(request, exc: AppError):
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.get("/health")
@app.get("/api/health")
async def health_check():
    return {"status": "ok"}


if settings.STATIC_DIR:
    # built frontend; mounted last so API routes win
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="frontend")


def run():
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
