from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from ra_server.db.session import Base
from ra_server.models.common import IntIdMixin

class Post(Base, IntIdMixin):
    __tablename__ = "posts"
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    status: Mapped[str | None] = mapped_column(String(50), nullable=True)
