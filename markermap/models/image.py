"""Image model for photos attached to a marker."""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from markermap.db.base import Base


class Image(Base):
    """Image database model.

    Only the URI of the picked photo is stored; the bytes live wherever the
    picker put them.
    """

    __tablename__ = "Image"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uri: Mapped[str] = mapped_column(Text, nullable=False)

    # Column keeps the camelCase name so existing database files open unchanged
    marker_id: Mapped[int] = mapped_column(
        "markerId",
        Integer,
        ForeignKey("Marker.id", ondelete="CASCADE"),
        nullable=False,
    )
