"""
Initial schema with books, awards and their association table.

Revision ID: 20261001_000000_initial_schema
Revises:
Create Date: 2026-10-01 00:00:00
"""

import sqlalchemy as sa

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "20261001_000000_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

AWARD_NAMES = (
    "BOOKER_PRIZE",
    "INTERNATIONAL_BOOKER_PRIZE",
    "ORWELL_PRIZE",
    "PORTICO_PRIZE",
    "PULITZER_PRIZE",
    "WOMENS_PRIZE_FOR_FICTION",
    "COSTA_BOOK_AWARD",
    "HUGO_AWARD",
    "NEBULA_AWARD",
    "NOBEL_PRIZE_IN_LITERATURE",
)
LANGUAGE_NAMES = (
    "AFRIKAANS",
    "ARABIC",
    "CHINESE",
    "ENGLISH",
    "FRENCH",
    "GERMAN",
    "HINDI",
    "ITALIAN",
    "JAPANESE",
    "PORTUGUESE",
    "RUSSIAN",
    "SPANISH",
)
GENRE_NAMES = (
    "ADVENTURE",
    "BIOGRAPHY",
    "CLASSIC",
    "CRIME",
    "FANTASY",
    "HISTORICAL",
    "HORROR",
    "NON_FICTION",
    "POETRY",
    "ROMANCE",
    "SCIENCE_FICTION",
    "THRILLER",
)
PUBLISHING_FORMATS = ("AUDIOBOOK", "EBOOK", "HARDCOVER", "PAPERBACK")


def _enum(values: tuple[str, ...], name: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True, length=64)


def upgrade() -> None:
    # books
    op.create_table(
        "books",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False)),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("language", _enum(LANGUAGE_NAMES, "language_name"), nullable=False),
        sa.Column("blurb", sa.Text()),
        sa.Column("genre", _enum(GENRE_NAMES, "genre_name"), nullable=False),
        sa.Column(
            "publishing_format", _enum(PUBLISHING_FORMATS, "publishing_format"), nullable=False
        ),
        sa.PrimaryKeyConstraint("id", name="books_pkey"),
    )
    op.create_index("idx_books_title", "books", ["title"])

    # awards
    op.create_table(
        "awards",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False)),
        sa.Column("award_name", _enum(AWARD_NAMES, "award_name"), nullable=False),
        sa.Column("category", sa.String(length=255), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="awards_pkey"),
    )
    op.create_index("idx_awards_name_year", "awards", ["award_name", "year"])

    # award_books
    op.create_table(
        "award_books",
        sa.Column("award_id", sa.BigInteger(), nullable=False),
        sa.Column("book_id", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(
            ["award_id"], ["awards.id"], ondelete="CASCADE", name="award_books_award_id_fkey"
        ),
        sa.ForeignKeyConstraint(
            ["book_id"], ["books.id"], ondelete="CASCADE", name="award_books_book_id_fkey"
        ),
        sa.PrimaryKeyConstraint("award_id", "book_id", name="award_books_pkey"),
    )
    op.create_index("idx_award_books_book", "award_books", ["book_id"])


def downgrade() -> None:
    op.drop_index("idx_award_books_book", table_name="award_books")
    op.drop_table("award_books")
    op.drop_index("idx_awards_name_year", table_name="awards")
    op.drop_table("awards")
    op.drop_index("idx_books_title", table_name="books")
    op.drop_table("books")
