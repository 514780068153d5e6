from ra_server.models.user import User
from ra_server.schemas.user import UserCreate, UserRead
from ra_server.services.fields import FieldSpec
from ra_server.services.resource import ResourceService


class UserService(ResourceService[UserRead, UserCreate, int]):
    name = "users"
    model = User
    read_schema = UserRead
    create_schema = UserCreate
    fields = {
        "id": FieldSpec("id", int, nullable=False, patchable=False),
        "name": FieldSpec("name", str, nullable=False),
        "email": FieldSpec("email", str, nullable=False),
        "role": FieldSpec("role", str),
    }
    search_fields = ("name", "email")
