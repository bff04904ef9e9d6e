# moodchef/models/catalog.py
# 앱 선택지용 무드/재료 카탈로그: 추천 후보일 뿐, 레시피 데이터 검증에는 쓰지 않는다
from typing import Dict, List

# === 무드 (앱 버튼) ===========================================================
MOODS: List[Dict[str, str]] = [
    {"name": "sad",      "label": "Sad",      "emoji": "😔"},
    {"name": "happy",    "label": "Happy",    "emoji": "😄"},
    {"name": "stressed", "label": "Stressed", "emoji": "😤"},
    {"name": "lazy",     "label": "Lazy",     "emoji": "🥱"},
    {"name": "love",     "label": "In Love",  "emoji": "😍"},
    {"name": "sick",     "label": "Sick",     "emoji": "🤢"},
    {"name": "bored",    "label": "Bored",    "emoji": "😩"},
]

# 무드별 어울리는 맛/분위기 힌트
MOOD_FLAVORS: Dict[str, List[str]] = {
    "sad":      ["comfort", "warm", "hearty", "creamy"],
    "happy":    ["fresh", "colorful", "light", "vibrant"],
    "stressed": ["calming", "simple", "soothing", "herbal"],
    "lazy":     ["easy", "quick", "simple", "minimal"],
    "love":     ["romantic", "special", "indulgent", "elegant"],
    "sick":     ["healing", "gentle", "nourishing", "warm"],
    "bored":    ["exciting", "flavorful", "creative", "spicy"],
}

# === 재료 (앱 칩) =============================================================
AVAILABLE_INGREDIENTS: List[str] = [
    "tomato", "potato", "onion", "garlic", "ginger", "spinach", "broccoli",
    "carrot", "bell pepper", "mushroom", "cucumber", "lettuce", "rice",
    "pasta", "bread", "tofu", "paneer", "cheese", "milk", "yogurt",
    "beans", "lentils", "chickpeas", "quinoa", "oats", "olive oil",
    "coconut oil", "butter", "flour", "eggs", "herbs", "spices",
]

def list_moods() -> List[Dict]:
    """무드 목록 + 맛 힌트(없으면 빈 리스트)"""
    return [{**m, "flavors": list(MOOD_FLAVORS.get(m["name"], []))} for m in MOODS]

def is_known_mood(mood: str) -> bool:
    return any(m["name"] == mood for m in MOODS)
