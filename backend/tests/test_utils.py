from moodchef.models.catalog import AVAILABLE_INGREDIENTS, MOODS, is_known_mood, list_moods
from moodchef.services.utils import normalize_ingredients, normalize_mood, normalize_name


def test_normalize_name():
    assert normalize_name("  Bell   Pepper ") == "bell pepper"
    assert normalize_name("ＲＩＣＥ") == "rice"
    assert normalize_name(None) == ""
    assert normalize_name(42) == ""


def test_normalize_mood_keeps_free_text():
    assert normalize_mood("Feeling Adventurous") == "feeling adventurous"


def test_normalize_ingredients_dedupes_in_order():
    got = normalize_ingredients(["Tomato", "garlic", "", None, "tomato ", "Garlic", "rice"])
    assert got == ["tomato", "garlic", "rice"]


def test_normalize_ingredients_empty():
    assert normalize_ingredients(None) == []
    assert normalize_ingredients([]) == []


def test_catalogs():
    assert len(MOODS) == 7
    assert len(AVAILABLE_INGREDIENTS) == 32
    assert len(set(AVAILABLE_INGREDIENTS)) == 32
    moods = {m["name"]: m for m in list_moods()}
    assert moods["love"]["label"] == "In Love"
    assert moods["sad"]["flavors"] == ["comfort", "warm", "hearty", "creamy"]


def test_known_mood_is_advisory():
    assert is_known_mood("happy")
    assert not is_known_mood("excited")
