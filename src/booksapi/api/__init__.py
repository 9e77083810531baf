"""HTTP application and endpoints."""
