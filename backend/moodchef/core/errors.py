# 도메인 예외: main.py에서 JSON {"error": ...} 응답으로 변환


class MoodChefError(Exception):
    # 공통 베이스: HTTP 상태 코드 + 앱에 보여줄 메시지
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class InvalidRequest(MoodChefError):
    # 무드/재료 누락 등 호출자 입력 오류
    status_code = 400
    message = "Mood and ingredients are required"


class RetrievalFailure(MoodChefError):
    # 저장소 조회 실패 (재시도 없음)
    status_code = 500
    message = "Failed to fetch recipes"


class SeedFailure(MoodChefError):
    status_code = 500
    message = "Failed to seed database"
