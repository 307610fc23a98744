from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase 필드명으로 입출력하는 기본 스키마 (snake_case 입력도 허용)"""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class SuccessResponse(CamelModel):
    """성공 응답 공통 필드"""
    success: bool = True


class ErrorResponse(BaseModel):
    """실패 응답 스키마"""
    success: bool = False
    error: str
