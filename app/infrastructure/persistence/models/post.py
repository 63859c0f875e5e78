"""Post (postagem) ORM model."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import IntegerIdMixin, TimestampMixin


class Post(IntegerIdMixin, TimestampMixin, Base):
    """Post model. Table: tb_postagens. updated_at is refreshed on every update."""

    __tablename__ = "tb_postagens"

    title: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    body: Mapped[str] = mapped_column(String(1000), nullable=False)
    author_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("tb_usuarios.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
