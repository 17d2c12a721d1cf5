from datetime import datetime
from sqlalchemy import Integer, Text, DateTime
from sqlalchemy.orm import declarative_base, Mapped, mapped_column


Base = declarative_base()


class TaskModel(Base):
    __tablename__ = "tasks"
    # SQLite only: keeps ids of deleted rows from being handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text)
    description: Mapped[str] = mapped_column(Text)
    # Naive wall-clock time in the configured task timezone, as stored in a
    # `timestamp without time zone` column
    created_at: Mapped[datetime] = mapped_column(DateTime)
    updated_at: Mapped[datetime] = mapped_column(DateTime)

    def __init__(
        self,
        title: str,
        description: str,
        created_at: datetime,
        updated_at: datetime,
    ):
        self.title = title
        self.description = description
        self.created_at = created_at
        self.updated_at = updated_at
