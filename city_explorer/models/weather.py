from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from city_explorer.db.session import Base


class WeatherRow(Base):
    __tablename__ = "weathers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    forecast: Mapped[str] = mapped_column(Text, nullable=False)
    time: Mapped[str] = mapped_column(String(255), nullable=False)
    location_id: Mapped[int] = mapped_column(
        ForeignKey("locations.id"),
        nullable=False,
        index=True,
    )
