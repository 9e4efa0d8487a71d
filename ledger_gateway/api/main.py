"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from ledger_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from ledger_gateway.api.v1 import ageing, status, tax, transactions
from ledger_gateway.infrastructure.observability.logging import setup_logging
from ledger_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Ledger Gateway",
        description="Transaction status, receivables/payables ageing and GST breakup service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logging.error(
            f"Unexpected error: {exc}",
            extra={"request_id": getattr(request.state, "request_id", "unknown")},
        )
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(status.router, prefix="/v1", tags=["status"])
    app.include_router(ageing.router, prefix="/v1", tags=["ageing"])
    app.include_router(tax.router, prefix="/v1", tags=["tax"])
    app.include_router(transactions.router, prefix="/v1", tags=["transactions"])

    return app


app = create_app()
