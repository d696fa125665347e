from pydantic import BaseModel, Field


class NoticeIn(BaseModel):
    """Body of a create request. Only presence is checked."""

    title: str = Field(min_length=1)
    category: str = Field(min_length=1)
    date: str = Field(min_length=1)
