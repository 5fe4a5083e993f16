"""서비스 계층 예외 - API 계층에서 HTTP 상태로 변환"""
from fastapi import HTTPException, status


class OrderError(Exception):
    """주문/고객/정산 처리 실패. message는 화면에 그대로 표시되는 문구"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(OrderError):
    """입력값 오류 / 재고 부족"""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(OrderError):
    status_code = status.HTTP_404_NOT_FOUND


def to_http(exc: OrderError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)
