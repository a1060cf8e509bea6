from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from app.config import get_settings
from app.routers import admin, banners, categories, products, settings as settings_router
from app.routers import payment_methods, telegram_channels, translate, uploads, storefront
from app.utils.media import UPLOAD_URL_PREFIX, UploadSizeLimitMiddleware, upload_root

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Storefront API")


@app.on_event("startup")
def on_startup():
    # Ensure all DB tables exist after all models are imported
    from app.models.user import Base, engine  # Base/engine single source
    import app.models.category  # register Category model
    import app.models.product  # register Product model
    import app.models.banner  # register Banner model
    import app.models.payment_method  # register PaymentMethod model
    import app.models.telegram_channel  # register TelegramChannel model
    import app.models.site_setting  # register SiteSetting model
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")


# ===== Error envelope: every failure answers {"error": ...} =====
def _validation_issues(exc: RequestValidationError) -> list:
    issues = []
    for err in exc.errors():
        loc = list(err.get("loc") or [])
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        issues.append({"path": loc, "message": err.get("msg", ""), "code": err.get("type", "")})
    return issues


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": _validation_issues(exc)})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Ensure upload directory exists before mounting
upload_root().mkdir(parents=True, exist_ok=True)

# Serve uploaded media files
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=str(upload_root())), name="uploads")

# Reject oversized upload bodies before the form is parsed
app.add_middleware(UploadSizeLimitMiddleware, path_prefix="/api/uploads")

# CORS configuration for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])
app.include_router(categories.router, prefix="/api/categories", tags=["categories"])
app.include_router(products.router, prefix="/api/products", tags=["products"])
app.include_router(banners.router, prefix="/api/banners", tags=["banners"])
app.include_router(payment_methods.router, prefix="/api/payment-methods", tags=["payment-methods"])
app.include_router(telegram_channels.router, prefix="/api/telegram-channels", tags=["telegram-channels"])
app.include_router(settings_router.router, prefix="/api/settings", tags=["settings"])
app.include_router(uploads.router, prefix="/api/uploads", tags=["uploads"])
app.include_router(translate.router, prefix="/api/translate", tags=["translate"])
app.include_router(storefront.router, prefix="/api/storefront", tags=["storefront"])


# --- Entry point for local runs ---
if __name__ == "__main__":
    import uvicorn, os
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("app.main:app", host="0.0.0.0", port=port, reload=False)
