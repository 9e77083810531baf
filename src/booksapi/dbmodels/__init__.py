"""
Database models for the Books API (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    Enum,
    ForeignKeyConstraint,
    Identity,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from ..enums import AwardName, GenreName, LanguageName, PublishingFormat

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


# Enum columns are stored as VARCHAR with a CHECK constraint on the member names
def _enum_column(enum_cls: type, name: str) -> Enum:
    return Enum(enum_cls, name=name, native_enum=False, create_constraint=True, length=64)


award_books = Table(
    "award_books",
    Base.metadata,
    Column("award_id", BigInteger, nullable=False),
    Column("book_id", BigInteger, nullable=False),
    ForeignKeyConstraint(
        ["award_id"], ["awards.id"], ondelete="CASCADE", name="award_books_award_id_fkey"
    ),
    ForeignKeyConstraint(
        ["book_id"], ["books.id"], ondelete="CASCADE", name="award_books_book_id_fkey"
    ),
    PrimaryKeyConstraint("award_id", "book_id", name="award_books_pkey"),
    Index("idx_award_books_book", "book_id"),
)


class Books(Base):
    __tablename__ = "books"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="books_pkey"),
        Index("idx_books_title", "title"),
    )

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=False))
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    language: Mapped[LanguageName] = mapped_column(
        _enum_column(LanguageName, "language_name"), nullable=False
    )
    blurb: Mapped[str | None] = mapped_column(Text)
    genre: Mapped[GenreName] = mapped_column(_enum_column(GenreName, "genre_name"), nullable=False)
    publishing_format: Mapped[PublishingFormat] = mapped_column(
        _enum_column(PublishingFormat, "publishing_format"), nullable=False
    )

    awards: Mapped[set["Awards"]] = relationship(
        "Awards", secondary=award_books, back_populates="books"
    )


class Awards(Base):
    __tablename__ = "awards"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="awards_pkey"),
        Index("idx_awards_name_year", "award_name", "year"),
    )

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=False))
    award_name: Mapped[AwardName] = mapped_column(
        _enum_column(AwardName, "award_name"), nullable=False
    )
    category: Mapped[str] = mapped_column(String(255), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    books: Mapped[set["Books"]] = relationship(
        "Books", secondary=award_books, back_populates="awards"
    )


target_metadata = Base.metadata

__all__ = ["Base", "Books", "Awards", "award_books", "target_metadata"]
