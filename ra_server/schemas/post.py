from pydantic import Field

from ra_server.schemas.resource import CamelModel

class PostCreate(CamelModel):
    title: str = Field(min_length=1, max_length=300)
    content: str | None = Field(default=None, max_length=2000)
    user_id: int
    status: str | None = None

class PostRead(CamelModel):
    id: int
    title: str
    content: str | None = None
    user_id: int
    status: str | None = None
