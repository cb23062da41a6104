# restobar/core/exceptions.py

"""
리소스 컨트롤러가 발생시키는 오류 분류와 FastAPI 예외 처리기를 정의하는 모듈입니다.

- AuthorizationDenied: 권한 없음 (403). 엔티티 존재 여부를 노출하지 않습니다.
- ValidationFailed: 필드 검증 실패 (422). 위반된 모든 필드를 나열합니다.
- UniquenessConflict: 이름 등 고유 필드 중복 (422). 필드 단위 메시지.
- NotFound: 식별자에 해당하는 엔티티 없음 (404).
- StoreFailure: 예상치 못한 저장소 오류 (500). 재시도하지 않습니다.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from restobar.core import messages

logger = logging.getLogger(__name__)

FieldErrors = Dict[str, List[str]]


class AppError(Exception):
    """모든 애플리케이션 오류의 기반 클래스입니다."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def body(self) -> Dict[str, Any]:
        raise NotImplementedError


class AuthorizationDenied(AppError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, locale: str, ability: str = "", resource: str = ""):
        super().__init__(f"denied: {resource}.{ability}")
        self.locale = locale
        self.ability = ability
        self.resource = resource

    def body(self) -> Dict[str, Any]:
        return {"message": messages.message(self.locale, "unauthorized")}


class ValidationFailed(AppError):
    status_code = 422  # Unprocessable Entity

    def __init__(self, errors: FieldErrors):
        super().__init__(f"validation failed: {sorted(errors)}")
        self.errors = errors

    def body(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class UniquenessConflict(ValidationFailed):
    """고유 필드 충돌. 응답 형태는 검증 실패와 동일합니다."""

    def __init__(self, field: str, locale: str):
        super().__init__({
            field: [messages.message(locale, "unique", attribute=messages.attribute_label(locale, field))]
        })
        self.field = field


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def body(self) -> Dict[str, Any]:
        return {"message": self.detail}


class StoreFailure(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, locale: str):
        super().__init__("store failure")
        self.locale = locale

    def body(self) -> Dict[str, Any]:
        return {"message": messages.message(self.locale, "store_failure")}


# =============================================================================
# FastAPI 예외 처리기
# =============================================================================
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, StoreFailure):
        logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc.__cause__)
    elif isinstance(exc, AuthorizationDenied):
        logger.info("Denied %s on %s", exc.ability, exc.resource)
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    경로/쿼리 파라미터 검증 오류도 `{errors: {field: [...]}}` 형태로 통일합니다.
    """
    locale = messages.resolve_locale(request.headers.get("accept-language"))
    errors: FieldErrors = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        field = loc[0] if loc else "request"
        errors.setdefault(field, []).append(
            messages.field_error(locale, error.get("type", "invalid"), field, **(error.get("ctx") or {}))
        )
    return JSONResponse(status_code=422, content={"errors": errors})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
