from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from ra_server.db.session import Base
from ra_server.models.common import IntIdMixin

class User(Base, IntIdMixin):
    __tablename__ = "users"
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    role: Mapped[str | None] = mapped_column(String(50), nullable=True)
