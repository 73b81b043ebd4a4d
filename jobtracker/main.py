"""FastAPI application for the job tracker."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from jobtracker import __version__
from jobtracker.api import auth, errors, health, jobs
from jobtracker.core import settings, setup_logging
from jobtracker.core.metrics import set_app_info, track_http_requests
from jobtracker.domain.exceptions import DomainError

setup_logging()

app = FastAPI(title=settings.api_title, version=settings.api_version)
set_app_info(version=__version__, environment=settings.environment)

app.state.limiter = auth.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(track_http_requests)

app.include_router(health.router)
app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(jobs.router, prefix=settings.api_prefix)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    http_exc = errors.to_http(exc)
    return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})


@app.get("/")
async def root() -> dict:
    return {"message": settings.api_title, "version": settings.api_version, "docs": app.docs_url}
