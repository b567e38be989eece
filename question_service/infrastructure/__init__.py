"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: the concurrent in-memory store
and the seed data loader.
"""
