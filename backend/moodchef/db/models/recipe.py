# 레시피 표준 스키마: 시드 삽입 전 검증용
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field, field_validator

from moodchef.services.utils import normalize_ingredients

class RecipeDoc(BaseModel):
    name: str = Field(..., min_length=1)
    moodTags: List[str] = Field(..., min_length=1)      # 열린 어휘, 소문자
    ingredients: List[str] = Field(..., min_length=1)   # 열린 어휘, 소문자, 레시피 고유 순서 유지
    description: str
    cookingTime: str                                    # 자유 텍스트 ("25 minutes")
    instructions: str
    moodDescription: str
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updatedAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("moodTags", "ingredients", mode="before")
    @classmethod
    def _v_norm_tags(cls, v):
        # 정규화 후 비어 있으면 min_length 검증에서 걸림
        return normalize_ingredients(v)
