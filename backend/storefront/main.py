"""
# `storefront/main.py` — Application entry point

## Overview
Creates the FastAPI app: logging is configured first, then CORS, the error envelope
handlers and the routers are attached.

## Routers
- `/api/products` — read-only catalog
- `/api/cart` — cart lifecycle (add / get / update / remove / clear)

## Error envelope
Every failure is rendered as `{"success": false, "message": ..., "error": ...}`
(see `storefront.core.errors`).
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import settings
from storefront.core.errors import register_exception_handlers
from storefront.core.logging import setup_logging
from storefront.routers import carts, products


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title="Storefront API",
        description="Product catalog and per-owner shopping carts backed by Firestore.",
        version=settings.version,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(products.router)
    app.include_router(carts.router)

    @app.get("/", tags=["Meta"])
    def root():
        return {
            "message": f"{settings.service_name} is running",
            "version": settings.version,
            "endpoints": {
                "products": "/api/products",
                "cart": "/api/cart",
            },
        }

    return app


app = create_app()

# Run the app directly with uvicorn (for development)
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("storefront.main:app", host="0.0.0.0", port=8000, reload=True)
