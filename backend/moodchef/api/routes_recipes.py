# moodchef/api/routes_recipes.py
# 레시피 목록 / 무드+재료 추천 / 시드

from __future__ import annotations
import logging
from typing import List

from fastapi import APIRouter, Depends
from pymongo.errors import PyMongoError

from moodchef.core.config import settings
from moodchef.core.errors import RetrievalFailure
from moodchef.db.init import get_db, get_recipes
from moodchef.db.models.schemas import (
    RecipeOut, RecipeRequestIn, ScoredRecipeOut, SeedResultOut, to_recipe_out,
)
from moodchef.services.reco import recommend
from moodchef.services.seed import SEED_RECIPES, mood_counts, reseed_recipes

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recipes"])

@router.get("/recipes", response_model=List[RecipeOut])
async def list_recipes(db=Depends(get_db)):
    """저장된 레시피 전체 (삽입 순)"""
    try:
        docs = await get_recipes(db).find({}).sort("_id", 1).to_list(length=None)
    except PyMongoError as e:
        log.exception("list recipes failed")
        raise RetrievalFailure() from e
    return [to_recipe_out(d) for d in docs]

@router.post("/get-recipes", response_model=List[ScoredRecipeOut])
async def get_recipes_for_mood(body: RecipeRequestIn, db=Depends(get_db)):
    """
    무드 + 보유 재료 → 상위 N개 레시피.
    - 무드/재료 누락: 400 {"error": "Mood and ingredients are required"}
    - 매칭 없음: 200 [] (앱이 "No recipes found" 상태로 표시)
    """
    log.info("received request: mood=%r ingredients=%r", body.mood, body.ingredients)
    top = await recommend(
        get_recipes(db),
        body.mood,
        body.ingredients,
        limit=body.limit or settings.DEFAULT_TOP_N,
    )
    return [to_recipe_out(d) for d in top]

@router.post("/seed-recipes", response_model=SeedResultOut)
async def seed_recipes(db=Depends(get_db)):
    # 컬렉션을 비우고 기본 카탈로그로 다시 채움
    count = await reseed_recipes(get_recipes(db))
    return SeedResultOut(
        message="Database seeded successfully",
        count=count,
        moods=mood_counts(SEED_RECIPES),
    )
