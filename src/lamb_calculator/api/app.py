"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lamb_calculator.api.admin import router as admin_router
from lamb_calculator.api.calculator_models import (
    CalculationRequest,
    CalculationResponse,
)
from lamb_calculator.app_logging import configure_logging
from lamb_calculator.config import parse_log_level
from lamb_calculator.containers import AppContainer

INVALID_REQUEST_MESSAGE = "Invalid calculation request"
INTERNAL_ERROR_MESSAGE = "Internal calculation error"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(parse_log_level(container.settings.log_level))
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Lamb calculator started: environment=%s",
            app.state.container.settings.environment,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _format_validation_error(exc)
        logger.info("Rejected request to %s: %s", request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": message},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/calculate-lamb", response_model=CalculationResponse)
    async def calculate_lamb(
        payload: CalculationRequest, request: Request
    ) -> CalculationResponse | JSONResponse:
        """Suggest how much lamb to buy for a party."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.calculator_service.calculate(
                payload.people, payload.hunger_level
            )
        except Exception as exc:
            logger.exception(
                "Lamb calculation failed",
                extra={"people": payload.people},
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"message": _format_internal_error(state_container, exc)},
            )
        return CalculationResponse.from_result(result)

    return app


def _format_validation_error(exc: RequestValidationError) -> str:
    """Return a readable message from pydantic validation errors."""
    messages = []
    for error in exc.errors():
        field = ".".join(
            part
            for part in error.get("loc", ())
            if isinstance(part, str) and part != "body"
        )
        text = error.get("msg", "")
        if not text:
            continue
        messages.append(f"{field}: {text}" if field else text)
    return "; ".join(messages) or INVALID_REQUEST_MESSAGE


def _format_internal_error(state_container: AppContainer, exc: Exception) -> str:
    """Return a user-facing error message with local debug info."""
    if state_container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{INTERNAL_ERROR_MESSAGE} (debug: {detail})"
    return INTERNAL_ERROR_MESSAGE
