import logging
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from mangum import Mangum
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from shopapi.config import settings
from shopapi.core.exception_handlers import (
    handle_base_api_exception,
    handle_http_exception,
    handle_unexpected_error,
    handle_validation_error,
)
from shopapi.core.exceptions import BaseAPIException
from shopapi.core.logging_middleware import LoggingMiddleware
from shopapi.logging_config import setup_logging
from shopapi.routers import health_router, member_router, preference_router

load_dotenv("shopapi/.env")
setup_logging(settings.LOG_LEVEL, log_sql=settings.LOG_SQL)
logger = logging.getLogger("shopapi")

app = FastAPI(title=settings.APP_NAME)

app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(BaseAPIException, handle_base_api_exception)
app.add_exception_handler(StarletteHTTPException, handle_http_exception)
app.add_exception_handler(RequestValidationError, handle_validation_error)
app.add_exception_handler(Exception, handle_unexpected_error)


@app.get("/")
def hello() -> dict:
    return {"message": f"{settings.APP_NAME} is running"}


app.include_router(health_router.router)
app.include_router(member_router.router)
app.include_router(preference_router.router)

logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")

handler = Mangum(app)
