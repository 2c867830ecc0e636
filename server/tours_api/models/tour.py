"""Tour model definition."""

from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base

if TYPE_CHECKING:
    from .travel import Travel


class Tour(Base):
    """Tour entity representing a dated, priced instance of a travel."""

    __tablename__ = "tours"

    # Primary key; ascending ids follow insertion order
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Foreign key to travel
    travel_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("travels.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Tour details
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    starting_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    ending_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Price information (stored as minor units, e.g., cents)
    price: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

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

    # Constraints
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_tour_price_non_negative"),
    )

    # Relationships
    travel: Mapped["Travel"] = relationship("Travel", back_populates="tours")

    def __repr__(self) -> str:
        return (
            f"<Tour(id={self.id}, travel_id={self.travel_id}, "
            f"starting_date={self.starting_date}, price={self.price})>"
        )
