"""Account ORM model for authentication and profile."""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import IntegerIdMixin, TimestampMixin


class Account(IntegerIdMixin, TimestampMixin, Base):
    """Account model. Table: tb_usuarios. Unique username (case-sensitive)."""

    __tablename__ = "tb_usuarios"

    username: Mapped[str] = mapped_column(String(255), nullable=False)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    avatar: Mapped[str | None] = mapped_column(String(5000), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("username", name="uq_tb_usuarios_username"),
    )
