"""
Restaurant Finder - Restaurant SQLAlchemy Model
================================================

What:  ORM mapping of the `restaurants` table.
How:   Inherits from the shared DeclarativeBase; Alembic and the test suite
       read its metadata. The storage gateway queries the underlying Table
       with Core statements, so rows come back as plain mappings.

Table Design:
    - id: integer surrogate key assigned by the database, never updated
    - rname / location / price_range: free text supplied by the client
    - image_url: public path returned by POST /upload, or NULL.
      Not a foreign key; nothing checks that the file still exists.
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from restaurant_finder.database import Base


class Restaurant(Base):
    """
    A restaurant listing.

    Lifecycle:
        1. Created by POST /api/v1/restaurants (database assigns id)
        2. Replaced in full by PUT /api/v1/restaurants/{id}
        3. Hard-deleted by DELETE /api/v1/restaurants/{id}
    """

    __tablename__ = "restaurants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    rname: Mapped[str] = mapped_column(String(255), nullable=False)

    location: Mapped[str] = mapped_column(String(255), nullable=False)

    # Text band such as "$", "$$", "$$$"
    price_range: Mapped[str] = mapped_column(String(20), nullable=False)

    image_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Restaurant(id={self.id}, rname='{self.rname}')>"


# Core table used by the storage gateway statements
restaurants_table = Restaurant.__table__
