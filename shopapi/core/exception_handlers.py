import logging
import traceback
from typing import Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .exceptions import InternalServerError, ValidationError

logger = logging.getLogger("shopapi")

# 회원/상품/찜 도메인 코드는 정상적인 업무 흐름의 거절이므로 INFO로 남긴다
_DOMAIN_CODE_PREFIXES = ("MEMBER_", "ADMIN_", "ITEM_", "PREFERENCE_")


def _describe(request: Request) -> str:
    client = request.client.host if request.client else "-"
    return f"{request.method} {request.url.path} from {client}"


def _log_error_response(
    request: Request, status_code: int, code: str, message: str, tb: Optional[str] = None
) -> None:
    line = f"[{code}] {_describe(request)} -> {status_code}: {message}"
    if status_code >= 500:
        logger.error(f"{line}\n\nStack Trace:\n{tb}" if tb else line)
    elif code.startswith(_DOMAIN_CODE_PREFIXES):
        logger.info(line)
    else:
        logger.warning(line)


def _error_body(code: str, message: str, details: Optional[dict] = None) -> dict:
    return {
        "success": False,
        "error": {"code": code, "message": message, "details": details or {}},
    }


async def handle_base_api_exception(request, exc):
    _log_error_response(request, exc.status_code, exc.error_code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.detail,
        headers=getattr(exc, "headers", None),
    )


async def handle_http_exception(request, exc):
    # 라우팅 404, 405 등 프레임워크가 직접 올리는 HTTPException
    tb = None
    if exc.status_code >= 500:
        tb = "".join(traceback.format_tb(exc.__traceback__))
    _log_error_response(request, exc.status_code, "HTTP_ERROR", str(exc.detail), tb)

    if isinstance(exc.detail, dict) and "error" in exc.detail:
        content = exc.detail
    else:
        content = _error_body("HTTP_ERROR", str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def handle_validation_error(request, exc):
    # field_validator의 ValueError가 ctx에 들어 있으므로 직렬화 가능한 형태로 변환
    error = ValidationError(details={"errors": jsonable_encoder(exc.errors())})
    fields = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]
    _log_error_response(
        request, error.status_code, error.error_code, f"invalid fields {fields}"
    )
    return JSONResponse(status_code=error.status_code, content=error.detail)


async def handle_unexpected_error(request, exc):
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    internal = InternalServerError()
    _log_error_response(
        request,
        internal.status_code,
        internal.error_code,
        f"{type(exc).__name__}: {exc}",
        tb,
    )
    return JSONResponse(status_code=internal.status_code, content=internal.detail)
