from pydantic import Field

from ra_server.schemas.resource import CamelModel

class UserCreate(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=200)
    role: str | None = None

class UserRead(CamelModel):
    id: int
    name: str
    email: str
    role: str | None = None
