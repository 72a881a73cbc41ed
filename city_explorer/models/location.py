from sqlalchemy import Float, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from city_explorer.db.session import Base


class LocationRow(Base):
    __tablename__ = "locations"
    __table_args__ = (
        UniqueConstraint("search_query", name="uq_locations_search_query"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    search_query: Mapped[str] = mapped_column(String(255), nullable=False)
    formatted_query: Mapped[str] = mapped_column(String(255), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
