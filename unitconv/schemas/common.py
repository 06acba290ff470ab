# unitconv/schemas/common.py
from pydantic import BaseModel, ConfigDict


class AppBaseModel(BaseModel):
    """모든 모델의 부모 클래스: V2 설정 적용"""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        from_attributes=True,
    )


class ErrorOut(AppBaseModel):
    error: str
    code: str
