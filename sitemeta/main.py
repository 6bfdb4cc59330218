import logging
import logging.config
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from sitemeta.config import SiteConfigError
from sitemeta.routers.limits import limiter
from sitemeta.routers.render import router as render_router
from sitemeta.routers.seo import router as seo_router
from sitemeta.routers.shortcodes import router as shortcodes_router

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": os.environ.get("SITEMETA_LOG_LEVEL", "INFO"), "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="sitemeta – Blog Metadata API",
    description="Derives SEO head metadata, renders posts and builds the feed for a static blog.",
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(SiteConfigError)
async def site_config_exception_handler(request: Request, exc: SiteConfigError) -> JSONResponse:
    logger.error("Site configuration unavailable for %s: %s", request.url, exc)
    return JSONResponse(status_code=500, content={"detail": "Site configuration is unavailable."})


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(seo_router)
app.include_router(shortcodes_router)
app.include_router(render_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from sitemeta"}
