"""
Medicine Marketplace - Main FastAPI Application

Single entry point for the storefront cart API and the admin API.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from marketplace.config import get_settings
from marketplace.errors import ERROR_INTERNAL, ERROR_VALIDATION, MarketplaceError
from marketplace.logging import get_logger
from marketplace.routers import admin_router, cart_router

logger = get_logger(__name__)


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    settings = get_settings()
    logger.info(
        "Starting marketplace API (admin auth: %s, zero-quantity policy: %s)",
        settings.admin_auth_mode.value,
        settings.zero_quantity_policy.value,
    )
    yield


app = FastAPI(
    title="Medicine Marketplace",
    description="Marketplace storefront and admin API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(cart_router, prefix="/api")
app.include_router(admin_router, prefix="/api/admin")


# ==================== ERROR ENVELOPE ====================

@app.exception_handler(MarketplaceError)
async def marketplace_error_handler(request: Request, exc: MarketplaceError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            # Drop the "body"/"query" location prefix
            "field": ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0]),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"message": ERROR_VALIDATION, "errors": errors})


# Routing 404/405 are raised as the Starlette base class, not fastapi.HTTPException
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": str(exc) or ERROR_INTERNAL})


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "marketplace"}
