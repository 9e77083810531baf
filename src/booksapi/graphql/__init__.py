"""GraphQL API for the Books API backend."""
