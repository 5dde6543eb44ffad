import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.config.settings import settings
from src.modules.inference.exceptions import GatewayError
from src.modules.inference.router import router as inference_router
from src.modules.inference.service import inference_service
from src.modules.registry.models import MODELS
from src.modules.registry.router import router as registry_router

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "GET /",
    "GET /health",
    "GET /api/models",
    "GET /api/models/{model}/chat?q=message",
    "GET /api/compare?q=message&models=model1,model2",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    base_url = f"http://localhost:{settings.app_port}"
    logger.info("Models gateway ready, %d models available", len(MODELS))
    logger.info("Documentation: %s/ | Health check: %s/health", base_url, base_url)
    yield
    await inference_service.aclose()


app = FastAPI(title="GitHub Models Gateway", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(registry_router, prefix="/api/models", tags=["models"])
app.include_router(inference_router, prefix="/api", tags=["inference"])


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Unknown paths and non-GET methods both count as unmatched routes
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={
                "error": "Endpoint not found",
                "available_endpoints": AVAILABLE_ENDPOINTS,
            },
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/")
async def root():
    return {
        "name": "GitHub Models Gateway",
        "description": f"Access all {len(MODELS)} GitHub AI models via simple GET requests",
        "version": app.version,
        "endpoints": {
            "models": "GET /api/models - List all available models",
            "chat": "GET /api/models/{model}/chat?q=your_message - Chat with specific model",
            "compare": "GET /api/compare?q=your_message&models=model1,model2 - Compare multiple models",
            "health": "GET /health - Health check",
        },
        "examples": {
            "gpt4o": "GET /api/models/gpt-4o/chat?q=Hello world",
            "llama": "GET /api/models/Meta-Llama-3.1-8B-Instruct/chat?q=Explain AI",
            "compare": "GET /api/compare?q=Write a joke&models=gpt-4o,Meta-Llama-3.1-8B-Instruct",
        },
        "available_models": len(MODELS),
        "authentication": "Configured server-side (no client auth required)",
    }


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "models_available": len(MODELS),
    }


if __name__ == "__main__":
    uvicorn.run(app, host=settings.app_host, port=settings.app_port)
