"""Marker model for user-placed map points."""

from sqlalchemy import Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from markermap.db.base import Base


class Marker(Base):
    """Marker database model - one geographic point placed by a map tap."""

    __tablename__ = "Marker"
    __table_args__ = {"sqlite_autoincrement": True}

    # AUTOINCREMENT keeps ids monotonic, so id order is insertion order
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Stored as REAL, returned bit-for-bit
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
