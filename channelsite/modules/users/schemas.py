from pydantic import BaseModel, EmailStr
from typing import Optional


class UserInvite(BaseModel):
    email: EmailStr


class UserSearch(BaseModel):
    term: Optional[str] = ""
