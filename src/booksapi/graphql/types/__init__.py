"""GraphQL type definitions."""
