"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from macro_journal.api.foods import router as foods_router
from macro_journal.api.meals import router as meals_router
from macro_journal.api.recipes import router as recipes_router
from macro_journal.api.summary import router as summary_router
from macro_journal.api.users import router as users_router
from macro_journal.app_logging import configure_logging
from macro_journal.config import parse_log_level
from macro_journal.containers import AppContainer
from macro_journal.domain.errors import (
    NotFoundError,
    ReferenceInUseError,
    ValidationError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(parse_log_level(container.settings.log_level))
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Macro Journal")
    app.state.container = container

    app.include_router(users_router)
    app.include_router(foods_router)
    app.include_router(recipes_router)
    app.include_router(meals_router)
    app.include_router(summary_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(ReferenceInUseError)
    async def reference_in_use(
        request: Request, exc: ReferenceInUseError
    ) -> JSONResponse:
        logger.info("Refused delete at %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc), "references": exc.references},
        )

    @app.exception_handler(ValidationError)
    async def invalid_input(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    return app
