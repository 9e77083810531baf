"""
Closed enumerations shared by the ORM models and the GraphQL schema
"""

from enum import Enum


class AwardName(Enum):
    """Literary awards an Award row may refer to."""

    BOOKER_PRIZE = "Booker Prize"
    INTERNATIONAL_BOOKER_PRIZE = "International Booker Prize"
    ORWELL_PRIZE = "Orwell Prize"
    PORTICO_PRIZE = "Portico Prize"
    PULITZER_PRIZE = "Pulitzer Prize"
    WOMENS_PRIZE_FOR_FICTION = "Women's Prize for Fiction"
    COSTA_BOOK_AWARD = "Costa Book Award"
    HUGO_AWARD = "Hugo Award"
    NEBULA_AWARD = "Nebula Award"
    NOBEL_PRIZE_IN_LITERATURE = "Nobel Prize in Literature"


class LanguageName(Enum):
    AFRIKAANS = "Afrikaans"
    ARABIC = "Arabic"
    CHINESE = "Chinese"
    ENGLISH = "English"
    FRENCH = "French"
    GERMAN = "German"
    HINDI = "Hindi"
    ITALIAN = "Italian"
    JAPANESE = "Japanese"
    PORTUGUESE = "Portuguese"
    RUSSIAN = "Russian"
    SPANISH = "Spanish"


class GenreName(Enum):
    ADVENTURE = "Adventure"
    BIOGRAPHY = "Biography"
    CLASSIC = "Classic"
    CRIME = "Crime"
    FANTASY = "Fantasy"
    HISTORICAL = "Historical"
    HORROR = "Horror"
    NON_FICTION = "Non-fiction"
    POETRY = "Poetry"
    ROMANCE = "Romance"
    SCIENCE_FICTION = "Science fiction"
    THRILLER = "Thriller"


class PublishingFormat(Enum):
    AUDIOBOOK = "Audiobook"
    EBOOK = "eBook"
    HARDCOVER = "Hardcover"
    PAPERBACK = "Paperback"


def parse_award_name(value: str | None) -> AwardName | None:
    """Resolve ``value`` to an :class:`AwardName`, or ``None`` if it names no award.

    Matches the member name (``"PORTICO_PRIZE"``) or the display value
    (``"Portico Prize"``) exactly. Never raises.
    """
    if not value:
        return None

    member = AwardName.__members__.get(value)
    if member is not None:
        return member

    for award_name in AwardName:
        if award_name.value == value:
            return award_name

    return None
