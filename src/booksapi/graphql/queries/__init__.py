"""Root GraphQL query definitions."""
