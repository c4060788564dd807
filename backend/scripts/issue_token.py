"""
기존 사용자 ID로 access 토큰을 발급하는 운영용 스크립트

사용법: python backend/scripts/issue_token.py <user_id>
"""

import asyncio
import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
project_root = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(project_root))

from backend.app.core.config import settings
from backend.app.core.security import create_access_token
from backend.app.db.mongo import MongoConnectionManager
from backend.app.db.users import UserRepository


async def main(user_id: str) -> int:
    users = UserRepository(MongoConnectionManager.get_collection(settings.users_collection))
    try:
        user = await users.find_by_id(user_id)
    finally:
        await MongoConnectionManager.close()

    if not user:
        print(f"[오류] 사용자를 찾을 수 없습니다: {user_id}", file=sys.stderr)
        return 1

    print(create_access_token(user_id))
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__, file=sys.stderr)
        raise SystemExit(2)
    raise SystemExit(asyncio.run(main(sys.argv[1])))
