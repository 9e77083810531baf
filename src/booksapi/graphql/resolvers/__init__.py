"""Resolver package for GraphQL schema.

The root Query and Mutation types import resolver functions lazily from the
sibling modules and convert the ORM rows they return into GraphQL types.
"""
