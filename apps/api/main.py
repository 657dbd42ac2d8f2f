from fastapi import FastAPI, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware
from typing import Optional
import logging

from shared.config.database import init_storage
from shared.config.settings import Settings, settings
from shared.exceptions import StorefrontError
from .dependencies import get_current_user, require_admin
from .routers import (
    admin_router,
    auth_router,
    blog_router,
    content_pages_router,
    email_templates_router,
    payments_router,
    plans_router,
    products_router,
    subscriptions_router,
    transactions_router,
    users_router,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI):
    """Render every error as {"message": ...}"""

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Validation failed", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.app_name,
        description="Software subscription storefront: catalog, crypto payments, content and admin back-office",
        version="1.0.0"
    )
    app.state.settings = app_settings
    app.state.storage = init_storage(app_settings)

    if app_settings.environment != "development" and app_settings.uses_default_session_secret:
        logger.warning(
            f"SESSION_SECRET is not set in {app_settings.environment}; "
            f"session cookies are signed with the built-in development secret"
        )

    # CORS middleware for React frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=app_settings.session_secret,
        session_cookie=app_settings.session_cookie,
        max_age=app_settings.session_max_age,
        https_only=app_settings.session_https_only,
    )

    register_exception_handlers(app)

    app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])

    app.include_router(
        users_router.router,
        prefix="/api/users",
        tags=["Users"],
        dependencies=[Depends(get_current_user)]
    )

    app.include_router(products_router.router, prefix="/api/products", tags=["Products"])
    app.include_router(plans_router.router, prefix="/api/subscription-plans", tags=["Subscription Plans"])

    app.include_router(
        transactions_router.router,
        prefix="/api/crypto-transactions",
        tags=["Crypto Transactions"]
    )
    app.include_router(subscriptions_router.router, prefix="/api/subscriptions", tags=["Subscriptions"])
    app.include_router(payments_router.router, prefix="/api", tags=["Payments"])

    app.include_router(blog_router.router, prefix="/api/blog-posts", tags=["Blog"])
    app.include_router(content_pages_router.router, prefix="/api/content-pages", tags=["Content Pages"])

    app.include_router(
        email_templates_router.router,
        prefix="/api/email-templates",
        tags=["Email Templates"],
        dependencies=[Depends(require_admin)]
    )

    app.include_router(
        admin_router.router,
        prefix="/api/admin",
        tags=["Admin"],
        dependencies=[Depends(require_admin)]
    )

    @app.get("/")
    async def root():
        return {
            "message": app_settings.app_name,
            "version": "1.0.0",
            "docs": "/docs"
        }

    @app.get("/api/health")
    async def health_check():
        return {"status": "healthy", "service": "storefront-api"}

    logger.info(f"{app_settings.app_name} ready ({app_settings.environment})")
    return app


logging.basicConfig(level=settings.log_level)

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
