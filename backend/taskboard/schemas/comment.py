from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from .user import UserSummary


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1)
    parent_id: Optional[int] = None
    mentions: Optional[List[int]] = Field(
        None, description="Mentioned user ids; parsed from @[Name](id) tokens in the content when omitted"
    )


class CommentUpdate(BaseModel):
    content: str = Field(..., min_length=1)
    mentions: Optional[List[int]] = None


class Comment(BaseModel):
    id: int
    task_id: int
    user_id: int
    parent_id: Optional[int] = None
    content: str
    mentions: List[int] = []
    user: Optional[UserSummary] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CommentThread(Comment):
    replies: List[Comment] = []
