from ra_server.models.post import Post
from ra_server.schemas.post import PostCreate, PostRead
from ra_server.services.fields import FieldSpec
from ra_server.services.resource import ResourceService


class PostService(ResourceService[PostRead, PostCreate, int]):
    name = "posts"
    model = Post
    read_schema = PostRead
    create_schema = PostCreate
    fields = {
        "id": FieldSpec("id", int, nullable=False, patchable=False),
        "title": FieldSpec("title", str, nullable=False),
        "content": FieldSpec("content", str),
        "userId": FieldSpec("user_id", int, nullable=False),
        "status": FieldSpec("status", str),
    }
    search_fields = ("title", "content")
