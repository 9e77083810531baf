"""
Book GraphQL type definitions
"""

import strawberry

from ...enums import GenreName, LanguageName, PublishingFormat

Language = strawberry.enum(LanguageName, name="LanguageName")
Genre = strawberry.enum(GenreName, name="GenreName")
Format = strawberry.enum(PublishingFormat, name="PublishingFormat")


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: strawberry.ID
    title: str
    language: Language
    blurb: str | None
    genre: Genre
    publishing_format: Format
