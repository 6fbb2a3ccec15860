"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, status

from ava_health.api.admin import router as admin_router
from ava_health.api.models import (
    AnalyzeRequest,
    ChatRequest,
    ChatResponse,
    LabelScanRequest,
    ProfilePayload,
    ProfileResponse,
    ScanResponse,
)
from ava_health.api.serializers import profile_response, scan_response
from ava_health.app_logging import configure_logging
from ava_health.containers import AppContainer
from ava_health.domain.products import ProductInfo, ScanResult
from ava_health.domain.profiles import UserHealthProfile
from ava_health.services.profiles import ProfileNotFoundError
from ava_health.services.scan import ScanProcessingError, ScanValidationError

_PROCESSING_FAILED = "Failed to process scan"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/users/{user_id}/scan/analyze")
    async def analyze_ingredients(
        user_id: UUID, body: AnalyzeRequest, request: Request
    ) -> ScanResponse:
        """Analyze pasted or previously extracted ingredient text."""
        state_container: AppContainer = request.app.state.container
        profile = _load_profile(state_container, user_id)
        product_info = (
            ProductInfo(**body.product.model_dump()) if body.product else None
        )
        result = _run_scan(state_container, body.text, profile, product_info)
        return scan_response(result)

    @app.post("/users/{user_id}/scan/label")
    async def scan_label(
        user_id: UUID, body: LabelScanRequest, request: Request
    ) -> ScanResponse:
        """Run OCR on a label photo, then analyze the extracted text."""
        state_container: AppContainer = request.app.state.container
        profile = _load_profile(state_container, user_id)
        try:
            extracted_text = await state_container.ocr_service.extract(body.image)
        except Exception as exc:
            logger.exception("Failed to extract text from label image")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=_PROCESSING_FAILED,
            ) from exc
        product_info = ProductInfo(
            name=body.product_name,
            category=body.product_category,
            barcode=body.barcode,
        )
        result = _run_scan(state_container, extracted_text, profile, product_info)
        return scan_response(result, extracted_text=extracted_text)

    @app.get("/users/{user_id}/profile")
    async def get_profile(user_id: UUID, request: Request) -> ProfileResponse:
        """Return the user's health profile."""
        state_container: AppContainer = request.app.state.container
        return profile_response(_load_profile(state_container, user_id))

    @app.put("/users/{user_id}/profile")
    async def update_profile(
        user_id: UUID, body: ProfilePayload, request: Request
    ) -> ProfileResponse:
        """Update the supplied profile fields."""
        state_container: AppContainer = request.app.state.container
        try:
            profile = state_container.profile_service.update_profile(
                user_id,
                allergies=body.allergies,
                dietary_preferences=body.dietary_preferences,
                skin_conditions=body.skin_conditions,
            )
        except ProfileNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        return profile_response(profile)

    @app.post("/users/{user_id}/chat")
    async def chat(user_id: UUID, body: ChatRequest, request: Request) -> ChatResponse:
        """Ask the assistant about a product or ingredients."""
        state_container: AppContainer = request.app.state.container
        profile = _load_profile(state_container, user_id)
        reply = await state_container.assistant_service.reply(
            body.message, profile, product_id=body.product_id
        )
        return ChatResponse(message=reply)

    return app


def _load_profile(container: AppContainer, user_id: UUID) -> UserHealthProfile:
    try:
        return container.profile_service.get_profile(user_id)
    except ProfileNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc


def _run_scan(
    container: AppContainer,
    text: str,
    profile: UserHealthProfile,
    product_info: ProductInfo | None,
) -> ScanResult:
    try:
        return container.scan_service.scan(text, profile, product_info)
    except ScanValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    except ScanProcessingError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_PROCESSING_FAILED,
        ) from exc

