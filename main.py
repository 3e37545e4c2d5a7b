"""
Document Request Kiosk
FastAPI application entry point
"""
import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from kiosk.core.config import Settings, settings as default_settings
from kiosk.api import catalog, documents, payment, profile, verification, workflow
from kiosk.services.submission_service import LocalSubmissionService, SubmissionService
from kiosk.services.verification_channel import VerificationChannel, channel_from_settings
from kiosk.services.workflow import WorkflowController

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings = default_settings,
    channel: Optional[VerificationChannel] = None,
    submission_service: Optional[SubmissionService] = None,
) -> FastAPI:
    """Build the kiosk API around a single workflow instance."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Self-service requests for transcripts, certificates and other institutional documents",
        version=settings.VERSION,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One kiosk, one workflow
    app.state.workflow = WorkflowController(
        channel=channel or channel_from_settings(settings),
        submission_service=submission_service or LocalSubmissionService(settings.SUBMISSION_DELAY_SECONDS),
        settings=settings,
    )

    # Include routers
    app.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
    app.include_router(workflow.router, prefix="/workflow", tags=["workflow"])
    app.include_router(verification.router, prefix="/verification", tags=["verification"])
    app.include_router(profile.router, prefix="/profile", tags=["profile"])
    app.include_router(documents.router, prefix="/documents", tags=["documents"])
    app.include_router(payment.router, prefix="/payment", tags=["payment"])

    @app.get("/")
    async def root():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": settings.PROJECT_NAME,
            "version": settings.VERSION,
        }

    @app.get("/health")
    async def health():
        """Detailed health check"""
        current = app.state.workflow
        return {
            "status": "healthy",
            "stage": current.stage.value,
            "verification_channel": type(current.channel).__name__,
            "submission_service": type(current.submission_service).__name__,
        }

    logger.info("%s %s ready", settings.PROJECT_NAME, settings.VERSION)
    return app


app = create_app()
