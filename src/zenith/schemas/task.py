"""Pydantic schemas for tasks.

Learn: Separate schemas for create/update/read keeps the API clean.
- TaskCreate: what you POST to create a task (owner required)
- TaskUpdate: what you PUT to replace a task's editable fields
- TaskRead: what the API returns
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    completed: bool = False
    user_id: int


class TaskUpdate(BaseModel):
    """Full update of the editable fields.

    user_id is accepted so clients can send a task back unchanged, but
    it is always replaced by the task's original owner.
    """
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    completed: bool = False
    user_id: Optional[int] = None


class TaskRead(BaseModel):
    id: int
    title: str
    description: Optional[str]
    completed: bool
    user_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
