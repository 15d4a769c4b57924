from fastapi import FastAPI, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from campus_wellness.db.base import get_db
from campus_wellness.core.config import settings
from campus_wellness.core.logging import configure_logging
from campus_wellness.routers import alerts as alerts_router
from campus_wellness.routers import burnout as burnout_router
from campus_wellness.routers import counselor as counselor_router
from campus_wellness.routers import mentor as mentor_router
from campus_wellness.routers import records as records_router
from campus_wellness.routers import users as users_router
from campus_wellness.routers import wellness as wellness_router
from campus_wellness.core.errors import (
    WellnessException,
    wellness_exception_handler,
    validation_exception_handler,
    unhandled_exception_handler,
)

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Campus Wellness API",
    description=(
        "**Student burnout early-warning service**\n\n"
        "Students submit daily check-ins; a deterministic scoring engine turns "
        "recent sleep, stress, deadlines, attendance and energy into a 0–100 "
        "burnout score, a risk level, predictive alerts and recommendations.\n\n"
        "All error responses follow the `{code, message, details}` envelope."
    ),
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Exception handlers (most specific first) ---
app.add_exception_handler(WellnessException, wellness_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# --- Routers ---
app.include_router(users_router.router)
app.include_router(records_router.router)
app.include_router(burnout_router.router)
app.include_router(alerts_router.router)
app.include_router(wellness_router.router)
app.include_router(counselor_router.router)
app.include_router(mentor_router.router)


@app.get("/health", tags=["health"], summary="Health check")
def health(db: Session = Depends(get_db)):
    """
    Returns `{"status": "ok", "db": "ok"}` when both the API and the database
    are reachable. Returns HTTP 503 if the DB is down.
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = "ok"
    except SQLAlchemyError:
        db_status = "unreachable"

    if db_status != "ok":
        return JSONResponse(
            status_code=503,
            content={"status": "error", "db": db_status},
        )
    return {"status": "ok", "db": "ok", "env": settings.APP_ENV}
