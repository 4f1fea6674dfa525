"""User model — guests and property owners."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from lightbnb.database import Base


class User(Base):
    """A LightBnB account. The password is stored as given."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
