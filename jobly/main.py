import logging

from fastapi import FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobly.config import settings
from jobly.core.exceptions import JoblyError
from jobly.database import check_connection, init_db
from jobly.logging_config import setup_logging
from jobly.routers import jobs

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Jobly API",
    description="Companies and the jobs they post.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(jobs.router)


@app.exception_handler(JoblyError)
async def jobly_error_handler(request, exc: JoblyError):
    logger.info("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request, exc: RequestValidationError):
    # Schema violations are plain bad requests in this API.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health/live")
def health_live():
    return {"status": "ok"}


@app.get("/health/ready")
def health_ready():
    try:
        check_connection()
    except Exception:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "not_ready"})
    return {"status": "ready"}


def check_settings() -> None:
    """Refuse to start production on shipped defaults; elsewhere just warn."""
    problems = settings.placeholder_problems()
    if not problems:
        return
    if settings.is_production:
        raise RuntimeError(f"Refusing to start in {settings.app_env}: " + "; ".join(problems))
    for problem in problems:
        logger.warning("%s; set it in .env before deploying", problem)


@app.on_event("startup")
def on_startup():
    logger.info("Starting Jobly API (env=%s)", settings.app_env)
    check_settings()
    init_db()


@app.get("/")
def root():
    return {"message": "Jobly API. GET /jobs to browse open positions."}
