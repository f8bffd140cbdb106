"""Resolver package for the GraphQL schema.

Resolvers read and write the LibraryStore found in the GraphQL context and
convert store records into GraphQL types.
"""
