"""Domain layer — options, predicates, and count rules.

This layer depends only on stdlib and paramdeps.errors.
It must never import from base, config, or dispatch.
"""
