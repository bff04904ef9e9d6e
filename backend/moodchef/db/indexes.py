# 컬렉션 인덱스 생성
# 앱 스타트업(또는 시드 스크립트)에서 한 번 ensure_indexes()를 await로 호출한다.

from moodchef.db.init import get_db, get_recipes

async def ensure_recipe_indexes(db):
    col = get_recipes(db)
    # 추천 쿼리의 $in 멤버십 조회 대상 두 필드
    await col.create_index([("moodTags", 1)])
    await col.create_index([("ingredients", 1)])

async def ensure_indexes(db=None):
    await ensure_recipe_indexes(db if db is not None else get_db())
