"""
스토어프론트 도메인 예외 정의
"""


class StorefrontError(Exception):
    """모든 스토어프론트 오류의 기본 클래스"""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(StorefrontError):
    """요청한 레코드가 없거나 호출자의 소유가 아님"""

    status_code = 404

    def __init__(self, resource: str, identifier=None):
        self.resource = resource
        self.identifier = identifier
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} not found: {identifier}"
        super().__init__(msg)


class ValidationError(StorefrontError):
    """입력값 검증 실패"""

    status_code = 400


class EmptyCartError(ValidationError):
    """빈 장바구니로 결제 시도"""

    def __init__(self):
        super().__init__("Cart is empty")


class ConflictError(StorefrontError):
    """유니크 제약 등 기존 데이터와 충돌"""

    status_code = 409


class InvalidStatusTransitionError(ConflictError):
    """허용되지 않는 주문 상태 변경"""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change order status from '{current}' to '{requested}'")
