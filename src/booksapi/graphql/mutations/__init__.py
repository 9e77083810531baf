"""Root GraphQL mutation definitions."""
