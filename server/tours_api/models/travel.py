"""Travel model definition."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base

if TYPE_CHECKING:
    from .tour import Tour


class Travel(Base):
    """Travel entity representing a trip offering made up of tours."""

    __tablename__ = "travels"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Travel information
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    number_of_days: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now(),
        server_onupdate=func.now()
    )

    __table_args__ = (
        CheckConstraint("number_of_days >= 0", name="ck_travel_number_of_days_non_negative"),
    )

    # Relationships
    tours: Mapped[list["Tour"]] = relationship(
        "Tour",
        back_populates="travel",
        cascade="all, delete-orphan"
    )

    @property
    def number_of_nights(self) -> int:
        return max(self.number_of_days - 1, 0)

    def __repr__(self) -> str:
        return f"<Travel(id={self.id}, slug='{self.slug}', is_public={self.is_public})>"
