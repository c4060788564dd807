from typing import Any

from pydantic import BaseModel


class UserPublic(BaseModel):
    id: str
    email: str | None = None
    name: str | None = None

    @classmethod
    def from_mongo(cls, doc: dict[str, Any]) -> "UserPublic":
        return cls(id=str(doc["_id"]), email=doc.get("email"), name=doc.get("name"))
