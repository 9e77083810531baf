"""
HTTP-style errors raised by GraphQL resolvers
"""

from typing import Any

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """A requested entity (or the value identifying it) could not be resolved.

    graphql-core copies ``extensions`` onto the GraphQL error that wraps this
    exception, so clients see the HTTP status alongside the message.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=reason)
        self.extensions: dict[str, Any] = {
            "code": "NOT_FOUND",
            "status": status.HTTP_404_NOT_FOUND,
        }

    @property
    def reason(self) -> str:
        return self.detail
