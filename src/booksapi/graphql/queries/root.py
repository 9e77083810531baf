"""
Root GraphQL query definitions
"""

import strawberry

from ..types.award import Award


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def awards(self, info: strawberry.Info) -> list[Award]:
        """Get all awards, oldest first."""
        from ..resolvers.award import resolve_awards, to_award_type

        return [to_award_type(award) for award in await resolve_awards(info)]

    @strawberry.field
    async def award(self, info: strawberry.Info, id: strawberry.ID) -> Award | None:
        """Get an award by ID."""
        from ..resolvers.award import resolve_award_by_id, to_award_type

        award = await resolve_award_by_id(info, id)
        return to_award_type(award) if award is not None else None
