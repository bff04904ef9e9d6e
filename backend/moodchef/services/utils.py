# moodchef/services/utils.py
# 무드/재료 입력 정규화 유틸
# - 저장된 moodTags/ingredients는 소문자 → 입력도 같은 키로 수렴
# - 카탈로그에 없는 값도 그대로 통과 (열린 어휘)

from __future__ import annotations
import unicodedata
from typing import Any, Iterable, List

def _nfkc(s: str) -> str:
    return unicodedata.normalize("NFKC", s or "")

def normalize_name(name: Any) -> str:
    # NFKC → 앞뒤 공백 제거 → 소문자 → 내부 다중 공백 정리
    if not isinstance(name, str):
        return ""
    return " ".join(_nfkc(name).strip().lower().split())

def normalize_mood(mood: Any) -> str:
    return normalize_name(mood)

def normalize_ingredients(names: Iterable[Any] | None) -> List[str]:
    # 다수 재료명을 정규화 → 빈 값 제거 → 중복 제거 (첫 등장 순서 유지)
    out: List[str] = []
    seen = set()
    for n in names or []:
        t = normalize_name(n)
        if t and t not in seen:
            seen.add(t)
            out.append(t)
    return out
