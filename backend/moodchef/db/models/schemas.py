# moodchef/db/models/schemas.py
# Pydantic 모델 정의
# RecipeRequestIn: 무드 + 보유 재료 입력 (누락 검증은 추천 엔진이 400으로 처리)
# ScoredRecipeOut: 앱 카드 스키마 (원본 필드 + matchScore/matchingIngredients)
from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field

from moodchef.core.config import settings

# # 무드/재료 기반 추천 입력
class RecipeRequestIn(BaseModel):
    mood: Optional[str] = None
    ingredients: Optional[List[Any]] = None  # null/비문자열 항목은 엔진에서 걸러짐
    limit: Optional[int] = Field(default=None, ge=1, le=settings.MAX_TOP_N)

# # 레시피 카드 (앱은 _id 키를 그대로 사용)
class RecipeOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    moodTags: List[str] = Field(default_factory=list)
    ingredients: List[str] = Field(default_factory=list)
    description: str = ""
    cookingTime: str = ""
    instructions: str = ""
    moodDescription: str = ""
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

class ScoredRecipeOut(RecipeOut):
    matchScore: int
    matchingIngredients: List[str] = Field(default_factory=list)

class MoodOut(BaseModel):
    name: str
    label: str
    emoji: str
    flavors: List[str] = Field(default_factory=list)

class SeedResultOut(BaseModel):
    message: str
    count: int
    moods: Dict[str, int] = Field(default_factory=dict)

class HealthOut(BaseModel):
    status: str
    message: str
    timestamp: str
    db: str

def to_recipe_out(doc: Mapping[str, Any]) -> dict:
    # Mongo 문서 → 응답 dict. ObjectId를 문자열로 변환
    d = dict(doc)
    d["_id"] = str(d.get("_id") or "")
    return d
