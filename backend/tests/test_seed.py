from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from moodchef.core.errors import SeedFailure
from moodchef.db.indexes import ensure_indexes
from moodchef.db.models.recipe import RecipeDoc
from moodchef.services.seed import SEED_RECIPES, mood_counts, reseed_recipes


def test_seed_catalog_is_valid():
    assert len(SEED_RECIPES) == 15
    for r in SEED_RECIPES:
        doc = RecipeDoc(**r)
        assert doc.moodTags and doc.ingredients
        assert all(t == t.lower() for t in doc.moodTags + doc.ingredients)


def test_mood_counts():
    assert mood_counts(SEED_RECIPES) == {
        "sad": 3,
        "stressed": 5,
        "happy": 10,
        "bored": 4,
        "sick": 4,
        "lazy": 3,
        "love": 2,
    }


def test_recipe_doc_normalizes_tags():
    doc = RecipeDoc(
        name="Test",
        moodTags=["Happy", " happy", "LOVE"],
        ingredients=["Rice ", "rice", "Bell  Pepper"],
        description="",
        cookingTime="5 minutes",
        instructions="",
        moodDescription="",
    )
    assert doc.moodTags == ["happy", "love"]
    assert doc.ingredients == ["rice", "bell pepper"]
    assert isinstance(doc.createdAt, datetime)


@pytest.mark.parametrize("field", ["moodTags", "ingredients"])
def test_recipe_doc_requires_non_empty_sets(field):
    data = dict(SEED_RECIPES[0])
    data[field] = ["  "]
    with pytest.raises(ValidationError):
        RecipeDoc(**data)


@pytest.mark.asyncio
async def test_reseed_replaces_collection(recipes):
    recipes.load([{"name": "stale", "moodTags": ["sad"], "ingredients": ["milk"]}])
    count = await reseed_recipes(recipes)
    assert count == 15
    assert len(recipes.docs) == 15
    assert "stale" not in [d["name"] for d in recipes.docs]
    assert all("_id" in d and "createdAt" in d for d in recipes.docs)


@pytest.mark.asyncio
async def test_reseed_twice_does_not_duplicate(recipes):
    await reseed_recipes(recipes)
    await reseed_recipes(recipes)
    assert len(recipes.docs) == 15


@pytest.mark.asyncio
async def test_invalid_seed_leaves_collection_untouched(recipes):
    recipes.load([{"name": "kept", "moodTags": ["sad"], "ingredients": ["milk"]}])
    bad = [dict(SEED_RECIPES[0], ingredients=[])]
    with pytest.raises(SeedFailure):
        await reseed_recipes(recipes, bad)
    assert [d["name"] for d in recipes.docs] == ["kept"]


@pytest.mark.asyncio
async def test_store_error_raises_seed_failure(recipes):
    recipes.fail = True
    with pytest.raises(SeedFailure):
        await reseed_recipes(recipes)


@pytest.mark.asyncio
async def test_ensure_indexes_on_membership_fields(fake_db, recipes):
    await ensure_indexes(fake_db)
    assert recipes.indexes == [[("moodTags", 1)], [("ingredients", 1)]]


def test_recipe_doc_timestamps_are_utc():
    doc = RecipeDoc(**SEED_RECIPES[0])
    assert doc.createdAt.tzinfo is not None
    assert doc.createdAt.utcoffset().total_seconds() == 0
