"""
User model for guests and property owners.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base


class User(Base):
    """
    User account.
    The password column holds whatever the caller supplied; hashing happens
    upstream of this layer.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Email address, looked up case-insensitively"
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Password as supplied by the caller"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
