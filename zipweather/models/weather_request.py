"""
Weather request log model.

Each row records one successful weather lookup together with the raw
provider payload.  Rows are written once and never updated.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text

from zipweather.database import Base


class WeatherRequest(Base):
    """
    Immutable log entry of a weather lookup.

    ``email`` is free text and deliberately not a foreign key to ``users``.
    """

    __tablename__ = "weather_requests"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String(255), index=True, nullable=False)
    zip_code = Column(String(10), index=True, nullable=False)
    weather_details = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<WeatherRequest(id={self.id}, email={self.email!r}, zip_code={self.zip_code!r})>"
