import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from dialysis_records.config import DEFAULT_JWT_SECRET, Settings, get_settings
from dialysis_records.database import Database
from dialysis_records.exceptions import ClinicError, ValidationError
from dialysis_records.routers import (
    clinical_progress, dashboard, dialysis, equipment, hemodialysis, medical_notes, medication,
    patient_management, patients, reports,
)
from dialysis_records.routers import auth as auth_router

logger = logging.getLogger(__name__)


class NoCacheMiddleware(BaseHTTPMiddleware):
    """Patient data must never be served from a browser cache."""
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, proxy-revalidate, max-age=0"
        response.headers["Expires"] = "0"
        response.headers["Pragma"] = "no-cache"
        return response


async def clinic_error_handler(request: Request, exc: ClinicError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _describe(error: dict) -> str:
    field = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
    return f"{field}: {error.get('msg')}" if field else str(error.get("msg"))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(_describe(e) for e in exc.errors()) or "Invalid request."
    return await clinic_error_handler(request, ValidationError(message))


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.is_production and settings.jwt_secret == DEFAULT_JWT_SECRET:
        raise RuntimeError("JWT_SECRET must be set to a non-default value in production")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = app.state.database
        try:
            await db.connect()
        except Exception:
            logger.exception("Could not connect to the database")
            raise
        logger.info("Connected to the database")
        yield
        await db.dispose()

    app = FastAPI(
        title="Dialysis Clinic Records API",
        description="Patient records for a dialysis clinic",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(NoCacheMiddleware)

    app.add_exception_handler(ClinicError, clinic_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(auth_router.router, prefix="/auth", tags=["Auth"])
    app.include_router(patients.router, prefix="/api/patients", tags=["Patients"])
    app.include_router(hemodialysis.router, prefix="/api/hemodialysis", tags=["Hemodialysis"])
    app.include_router(dialysis.router, prefix="/api/dialysis", tags=["Dialysis"])
    app.include_router(equipment.router, prefix="/api/equipment", tags=["Equipment"])
    app.include_router(medication.router, prefix="/api/medication", tags=["Medication"])
    app.include_router(patient_management.router, prefix="/api/patient-management", tags=["Patient Management"])
    app.include_router(reports.router, prefix="/api/reports", tags=["Reports"])
    app.include_router(clinical_progress.router, prefix="/api/clinical-progress", tags=["Clinical Progress"])
    app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
    app.include_router(medical_notes.router, prefix="/api", tags=["Medical Notes"])

    @app.get("/")
    async def root():
        return {"message": "Dialysis clinic records API is running"}

    @app.get("/api/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": "dialysis-records-api",
            "apiBaseUrl": settings.public_api_base_url,
        }

    return app


app = create_app()
