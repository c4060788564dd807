import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pymongo.errors import PyMongoError

from ..db.users import UserRepository
from ..dependencies import get_user_repository
from ..schemas.user import UserPublic
from .security import TokenError, decode_token

logger = logging.getLogger(__name__)

http_bearer = HTTPBearer(auto_error=False)


async def get_current_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(http_bearer),
) -> dict:
    if credentials is None:
        raise TokenError()
    return decode_token(credentials.credentials)


async def get_current_user(
    request: Request,
    payload: dict = Depends(get_current_token),
    users: UserRepository = Depends(get_user_repository),
) -> UserPublic:
    # 잘못된 토큰과 존재하지 않는 사용자는 같은 401로 응답한다
    try:
        doc = await users.find_by_id(payload["sub"])
    except PyMongoError as exc:
        logger.warning("사용자 조회 실패: %s", exc)
        raise TokenError() from exc
    if not doc:
        raise TokenError()

    user = UserPublic.from_mongo(doc)
    request.state.user = user
    return user
