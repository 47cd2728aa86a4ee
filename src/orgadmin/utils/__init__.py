"""Shared utilities for the resolvers."""
