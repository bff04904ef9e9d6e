# moodchef/api/routes_catalog.py
# 앱 선택지(무드 버튼/재료 칩) 제공

from typing import List

from fastapi import APIRouter

from moodchef.db.models.schemas import MoodOut
from moodchef.models.catalog import AVAILABLE_INGREDIENTS, list_moods

router = APIRouter(prefix="/api", tags=["catalog"])

@router.get("/ingredients", response_model=List[str])
async def get_ingredients():
    return AVAILABLE_INGREDIENTS

@router.get("/moods", response_model=List[MoodOut])
async def get_moods():
    return list_moods()
