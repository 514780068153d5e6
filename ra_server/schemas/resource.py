from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, List, Literal

Direction = Literal["ASC", "DESC"]

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class PageRequest(BaseModel):
    start: int
    end: int
    sort_field: str
    sort_direction: Direction

    @property
    def page_size(self) -> int:
        return self.end - self.start

    @property
    def page_index(self) -> int:
        # Page arithmetic, not an offset: non-aligned windows snap to the page containing `start`.
        return self.start // self.page_size

class PageResult(BaseModel):
    items: List[Any] = []
    total: int = 0

class ReferenceQuery(BaseModel):
    target_field: str
    target_id: str
