"""Database models."""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flashdeck.database import Base


class Deck(Base):
    """Deck of flashcards owned by one user."""

    __tablename__ = "decks"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    flashcards: Mapped[list["Flashcard"]] = relationship(
        back_populates="deck", cascade="all, delete-orphan"
    )
    generations: Mapped[list["Generation"]] = relationship(
        back_populates="deck", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of Deck."""
        return f"<Deck(id={self.id}, name='{self.name}')>"


class Generation(Base):
    """One call to the language model that produced flashcard candidates."""

    __tablename__ = "generations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    deck_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("decks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    model: Mapped[str] = mapped_column(String(255), nullable=False)
    generated_count: Mapped[int] = mapped_column(Integer, nullable=False)
    source_text_hash: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    source_text_length: Mapped[int] = mapped_column(Integer, nullable=False)
    generation_duration: Mapped[int] = mapped_column(Integer, nullable=False)
    accepted_unedited_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    accepted_edited_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    deck: Mapped["Deck"] = relationship(back_populates="generations")

    def __repr__(self) -> str:
        """String representation of Generation."""
        return f"<Generation(id={self.id}, model='{self.model}', count={self.generated_count})>"


class Flashcard(Base):
    """Flashcard belonging to a deck."""

    __tablename__ = "flashcards"
    __table_args__ = (
        CheckConstraint(
            "source IN ('manual', 'ai-full', 'ai-edited')", name="ck_flashcards_source"
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    deck_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("decks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    generation_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("generations.id", ondelete="SET NULL"), nullable=True, index=True
    )
    front: Mapped[str] = mapped_column(String(200), nullable=False)
    back: Mapped[str] = mapped_column(Text, nullable=False)
    source: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    deck: Mapped["Deck"] = relationship(back_populates="flashcards")

    def __repr__(self) -> str:
        """String representation of Flashcard."""
        return f"<Flashcard(id={self.id}, source='{self.source}')>"
