"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.award import Award


@strawberry.input
class AddAwardInput:
    """Input for creating a new award."""

    award_name: str
    category: str
    year: int


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addAward")
    async def add_award(self, info: strawberry.Info, input: AddAwardInput) -> None:
        """Create an award. Fails with a not-found error for unknown award names."""
        from ..resolvers.award import add_award

        await add_award(info, input)

    @strawberry.mutation(name="deleteAward")
    async def delete_award(self, info: strawberry.Info, id: strawberry.ID | None = None) -> Award:
        """Delete an award and return it."""
        from ..resolvers.award import delete_award, to_award_type

        return to_award_type(await delete_award(info, id))
