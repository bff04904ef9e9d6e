# 무드 + 보유 재료 기반 추천: 조회(무드 AND 재료) → 폴백(재료만) → 겹치는 재료 수로 정렬
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Mapping, Set

from pymongo.errors import PyMongoError

from moodchef.core.config import settings
from moodchef.core.errors import InvalidRequest, RetrievalFailure
from moodchef.models.catalog import is_known_mood
from moodchef.services.utils import normalize_ingredients, normalize_mood

log = logging.getLogger(__name__)

def mood_query(mood: str, ingredients: List[str]) -> Dict[str, Any]:
    return {
        "$and": [
            {"moodTags": {"$in": [mood]}},
            {"ingredients": {"$in": ingredients}},
        ]
    }

def ingredient_query(ingredients: List[str]) -> Dict[str, Any]:
    return {"ingredients": {"$in": ingredients}}

async def _find(col, query: Dict[str, Any]) -> List[Dict[str, Any]]:
    # _id 오름차순(=삽입 순) 고정 → 동점 순서가 저장소 반환 순서에 흔들리지 않음
    n = settings.CANDIDATE_LIMIT
    try:
        return await col.find(query).sort("_id", 1).limit(n).to_list(length=n)
    except PyMongoError as e:
        log.exception("recipe query failed: %s", query)
        raise RetrievalFailure() from e

def score_recipe(doc: Mapping[str, Any], wanted: Set[str]) -> Dict[str, Any]:
    # 레시피 자체 재료 순서를 유지한 교집합
    matching = [i for i in (doc.get("ingredients") or []) if i in wanted]
    return {**doc, "matchScore": len(matching), "matchingIngredients": matching}

async def recommend(
    col,
    mood: str,
    ingredients: Iterable[str],
    limit: int = settings.DEFAULT_TOP_N,
) -> List[Dict[str, Any]]:
    """
    무드/재료로 레시피를 골라 matchScore 내림차순 상위 limit개 반환.
    - 1차: moodTags에 mood 포함 AND ingredients가 요청 재료와 하나라도 겹침
    - 1차 결과가 0건이면 무드를 무시하고 재료만으로 재조회
    - 둘 다 0건이면 빈 리스트 (오류 아님)
    """
    mood_key = normalize_mood(mood)
    wanted = normalize_ingredients(ingredients)
    if not mood_key or not wanted:
        raise InvalidRequest()
    if limit is None or limit < 1:
        raise InvalidRequest("limit must be a positive integer")

    log.info("recommend mood=%s custom=%s ingredients=%s", mood_key, not is_known_mood(mood_key), wanted)

    docs = await _find(col, mood_query(mood_key, wanted))
    if not docs:
        log.info("no recipe tagged %r, falling back to ingredient-only search", mood_key)
        docs = await _find(col, ingredient_query(wanted))

    wanted_set = set(wanted)
    scored = [score_recipe(d, wanted_set) for d in docs]
    # 안정 정렬: 동점은 후보 순서 유지
    scored.sort(key=lambda r: r["matchScore"], reverse=True)

    top = scored[:limit]
    log.info("found %d recipes (candidates=%d)", len(top), len(docs))
    return top
