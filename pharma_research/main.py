from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from pharma_research.core.config import settings
from pharma_research.core.database import engine, Base
from pharma_research.api import api_router
from pharma_research.middleware.error_handler import global_exception_handler
from pharma_research.middleware.logging import configure_logging
from pharma_research.utils.exceptions import ProductNotFoundError, ProductValidationError
from pharma_research.utils.validators import INVALID_DATA_MESSAGE, collect_field_errors

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.APP_NAME} {settings.VERSION}")

    Base.metadata.create_all(bind=engine)

    yield

    logger.info(f"Stopping {settings.APP_NAME}")


app = FastAPI(title=settings.APP_NAME, version=settings.VERSION, lifespan=lifespan)


origins = settings.ALLOWED_ORIGINS

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["Content-Type", "Accept"],
)


app.include_router(api_router, prefix=settings.API_PREFIX)

app.add_exception_handler(Exception, global_exception_handler)


@app.exception_handler(ProductNotFoundError)
async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "product_not_found",
            "message": f"Product {exc.product_id} not found",
            "product_id": exc.product_id,
        },
    )


@app.exception_handler(ProductValidationError)
async def product_validation_handler(request: Request, exc: ProductValidationError):
    return JSONResponse(
        status_code=422,
        content={"message": INVALID_DATA_MESSAGE, "errors": exc.errors},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = collect_field_errors(exc.errors(), skip_prefix="body")
    logger.warning(f"Malformed request on {request.url.path}: {errors}")
    return JSONResponse(
        status_code=422,
        content={"message": INVALID_DATA_MESSAGE, "errors": errors},
    )


@app.get("/")
async def root():
    return {"message": settings.APP_NAME, "version": settings.VERSION, "docs": "/docs"}
