"""Mutation resolvers for organization administration."""
