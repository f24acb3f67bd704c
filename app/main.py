import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import feedback, health
from app.core.config import ALLOWED_ORIGINS, LOG_LEVEL
from app.core.logging_config import setup_logging, sanitize_log_data


setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Interview Feedback API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["Authorization", "Content-Type"],
)


# ============================================
# ✅ ERROR HANDLERS
# ============================================

@app.exception_handler(Exception)
def generic_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc} "
        f"headers={sanitize_log_data(dict(request.headers))}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred."},
    )


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(feedback.router)
app.include_router(health.router)


# ============================================
# ✅ ROOT ENDPOINT (dashboard landing)
# ============================================

@app.get("/")
def root():
    return {"status": "Interview Feedback API running"}
