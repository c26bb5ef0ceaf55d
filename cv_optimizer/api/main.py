from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
import uvicorn

from cv_optimizer import __version__
from cv_optimizer.config.logging_config import get_logger, log_error_with_context, setup_logging
from cv_optimizer.config.settings import get_config
from cv_optimizer.error_handling.exceptions import ConfigurationError, ValidationError

from .cv_api import router
from .schemas import api_error

# Setup logging
setup_logging()
logger = get_logger(__name__)


def _format_validation_error(exc: RequestValidationError) -> str:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        details.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "Invalid request: " + "; ".join(details)


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    config = get_config()
    application = FastAPI(title=config.api.title, version=__version__)
    application.include_router(router)

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "Request validation failed",
            extra={"path": request.url.path, "errors": len(exc.errors())},
        )
        return api_error(_format_validation_error(exc), 400)

    @application.exception_handler(ValidationError)
    async def input_validation_exception_handler(request: Request, exc: ValidationError):
        logger.warning(
            "Request rejected",
            extra={
                "path": request.url.path,
                "field_name": exc.context.additional_data.get("field_name"),
            },
        )
        return api_error(exc.message, 400)

    @application.exception_handler(ConfigurationError)
    async def configuration_exception_handler(request: Request, exc: ConfigurationError):
        log_error_with_context(logger, f"Configuration error on {request.url.path}", exc)
        structured = exc.with_context(request_path=request.url.path).to_structured_error()
        return api_error(exc.message, 500, message=structured.user_message)

    return application


app = create_app()


def main():
    config = get_config()
    logger.info("Starting CV Optimizer API on %s:%s", config.api.host, config.api.port)
    uvicorn.run(app, host=config.api.host, port=config.api.port)


if __name__ == "__main__":
    main()
