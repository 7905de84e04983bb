"""EntryMeta ORM model. Per-entry key/value metadata (holds cached embeds)."""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from embedgate.infrastructure.persistence.database import Base


class EntryMeta(Base):
    """One meta value for one entry. Table: entry_meta.

    meta_key is the embed cache key (tweet_output_<form_id>:<field_id>);
    form_id records the form the value was written for.
    Unique (entry_id, meta_key).
    """

    __tablename__ = "entry_meta"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    entry_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    form_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    meta_key: Mapped[str] = mapped_column(String(255), nullable=False)
    meta_value: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("entry_id", "meta_key", name="uq_entry_meta_entry_key"),
    )
