from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from payflow import __version__, config
from payflow.api.routes import STATIC_DIR, router
from payflow.ir.errors import FlowError
from payflow.utils.log import configure_logging, get_logger


logger = get_logger(__name__)


async def flow_error_handler(request: Request, exc: FlowError) -> JSONResponse:
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Payments Flow Diagram Generator",
        version=__version__,
    )

    # Middleware FIRST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FlowError, flow_error_handler)

    # Routes AFTER middleware
    app.include_router(router)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.on_event("startup")
    def startup():
        configure_logging(config.LOG_LEVEL)
        if not config.OPENAI_API_KEY:
            logger.warning("OPENAI_API_KEY is not set; /api/flow will return 500")
        logger.info("Using model %s at %s", config.OPENAI_MODEL, config.OPENAI_BASE_URL)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API and UI with uvicorn."""
    import argparse

    import uvicorn

    parser = argparse.ArgumentParser(description="Serve the payments flow diagram generator")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args()

    uvicorn.run("payflow.main:app", host=args.host, port=args.port, reload=args.reload)
