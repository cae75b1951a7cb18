import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from articles_api import __version__
from articles_api.cache import cache
from articles_api.config import settings
from articles_api.database import async_session, create_tables
from articles_api.exceptions import ArticlesApiError, DataSourceUnavailableError, NotFoundError, UnauthorizedError
from articles_api.logging_config import configure_logging
from articles_api.middleware import TimingMiddleware
from articles_api.routers import articles, auth, newspapers, s3_files
from articles_api.seed import seed_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging(settings.LOG_LEVEL)
    await cache.connect()  # app works without Redis
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()
    if settings.SEED_ON_STARTUP:
        async with async_session() as session:
            await seed_database(session)
            await session.commit()
    logger.info("Articles API started (env=%s, s3_articles=%s)", settings.APP_ENV, settings.USE_S3_ARTICLES)
    yield
    # Shutdown
    await cache.disconnect()


app = FastAPI(
    title="Articles API",
    description="CRUD API for articles and newspapers, with an optional S3-backed read path",
    version=__version__,
    lifespan=lifespan,
)


# Error translation
@app.exception_handler(ArticlesApiError)
async def articles_api_error_handler(request: Request, exc: ArticlesApiError):
    if isinstance(exc, DataSourceUnavailableError):
        logger.error("%s %s: %s", request.method, request.url.path, exc.message)
    elif not isinstance(exc, NotFoundError):
        logger.warning("%s %s: %s", request.method, request.url.path, exc.message)

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred"})


# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers (object storage first: its paths share the /api/articles prefix)
app.include_router(s3_files.router)
app.include_router(articles.router)
app.include_router(newspapers.router)
app.include_router(auth.router)


@app.get("/health")
async def health():
    return {"status": "healthy", "version": __version__, "cache": cache.stats}
