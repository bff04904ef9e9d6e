# scripts/seed_recipes.py
# 사용: python -m moodchef.scripts.seed_recipes
# 레시피 컬렉션을 기본 카탈로그로 비우고 다시 채운 뒤 무드별 요약을 출력한다.
import asyncio
import logging
import sys

from motor.motor_asyncio import AsyncIOMotorClient

from moodchef.core.config import settings
from moodchef.core.errors import SeedFailure
from moodchef.db.indexes import ensure_recipe_indexes
from moodchef.db.init import get_recipes
from moodchef.services.seed import SEED_RECIPES, mood_counts, reseed_recipes

async def main() -> int:
    cli = AsyncIOMotorClient(settings.MONGODB_URI)
    db = cli[settings.MONGODB_DB]
    try:
        await db.command("ping")
        print(f"[seed] connected to {settings.MONGODB_URI}/{settings.MONGODB_DB}")

        await ensure_recipe_indexes(db)
        count = await reseed_recipes(get_recipes(db), SEED_RECIPES)
    except SeedFailure as e:
        print(f"[seed] error seeding database: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"[seed] mongo connection error: {e}", file=sys.stderr)
        return 1
    finally:
        cli.close()

    print(f"[seed] done. inserted={count}")
    print("[seed] recipes by mood:")
    for mood, n in mood_counts(SEED_RECIPES).items():
        print(f"  - {mood}: {n} recipes")
    return 0

if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    sys.exit(asyncio.run(main()))
