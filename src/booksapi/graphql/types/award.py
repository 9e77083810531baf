"""
Award GraphQL type definitions
"""

import strawberry

from ...enums import AwardName as AwardNameEnum
from .book import Book

AwardName = strawberry.enum(AwardNameEnum, name="AwardName")


@strawberry.type
class Award:
    """Award type for GraphQL API."""

    id: strawberry.ID
    award_name: AwardName
    category: str
    year: int
    books: list[Book]
