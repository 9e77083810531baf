from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...dbmodels import Awards, Books
from ...enums import parse_award_name
from ...errors import NotFoundError
from ...logging import get_logger

if TYPE_CHECKING:
    from ...services.award import AwardService
    from ..mutations.root import AddAwardInput
    from ..types.award import Award
    from ..types.book import Book

logger = get_logger(__name__)

NOT_FOUND_ERROR_MESSAGE = "Award not found"


def get_award_service(info: strawberry.Info) -> AwardService:
    """Return the AwardService placed in the GraphQL context for this request."""
    return info.context["award_service"]


def to_book_type(book: Books) -> Book:
    from ..types.book import Book as BookType

    return BookType(
        id=strawberry.ID(str(book.id)),
        title=book.title,
        language=book.language,
        blurb=book.blurb,
        genre=book.genre,
        publishing_format=book.publishing_format,
    )


def to_award_type(award: Awards) -> Award:
    """Convert an Award row (with books loaded) to its GraphQL type."""
    from ..types.award import Award as AwardType

    return AwardType(
        id=strawberry.ID(str(award.id)),
        award_name=award.award_name,
        category=award.category,
        year=award.year,
        books=[to_book_type(book) for book in award.books],
    )


def _parse_id(value: str | None) -> int | None:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


# Query resolvers
async def resolve_awards(info: strawberry.Info) -> list[Awards]:
    return await get_award_service(info).find_all()


async def resolve_award_by_id(info: strawberry.Info, id: str) -> Awards | None:
    award_id = _parse_id(id)
    if award_id is None:
        return None
    return await get_award_service(info).find_by_id(award_id)


# Mutation resolvers
async def add_award(info: strawberry.Info, input: AddAwardInput) -> None:
    """
    Create an award for a known award name.

    Raises NotFoundError when the name does not match any AwardName member.
    """
    award_name = parse_award_name(input.award_name)
    if award_name is None:
        logger.info("Award not found", reason="unknown_award_name", award_name=input.award_name)
        raise NotFoundError(NOT_FOUND_ERROR_MESSAGE)

    award = Awards(award_name=award_name, category=input.category, year=input.year)
    await get_award_service(info).save(award)

    logger.info(
        "Award created",
        award_id=award.id,
        award_name=award_name.name,
        category=input.category,
        year=input.year,
    )


async def delete_award(info: strawberry.Info, id: str | None) -> Awards:
    """
    Delete the award with the given id and return the deleted row.

    Raises NotFoundError when the id is absent, malformed, or matches no award.
    """
    if not id:
        logger.info("Award not found", reason="missing_id")
        raise NotFoundError(NOT_FOUND_ERROR_MESSAGE)

    award_id = _parse_id(id)
    if award_id is None:
        logger.info("Award not found", reason="malformed_id", award_id=id)
        raise NotFoundError(NOT_FOUND_ERROR_MESSAGE)

    award_service = get_award_service(info)
    award = await award_service.find_by_id(award_id)
    if award is None:
        logger.info("Award not found", reason="no_such_award", award_id=award_id)
        raise NotFoundError(NOT_FOUND_ERROR_MESSAGE)

    await award_service.delete_award(award)
    logger.info("Award deleted", award_id=award_id)

    return award
