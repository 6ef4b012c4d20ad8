"""Relational schema management for the SQL providers."""

from protean.domain import Domain
from sqlalchemy import create_engine

_SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in _SQL_PROVIDERS:
            yield provider


def _register_tables(domain: Domain, provider) -> None:
    """Touch every DAO bound to ``provider`` so its table lands in the metadata."""
    records = list(domain.registry.aggregates.values()) + list(domain.registry.entities.values())
    for record in records:
        if record.cls.meta_.provider == provider.name:
            domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> list[str]:
    """Create tables for Users, Products, Orders and OrderItems.

    Returns the names of the providers whose schema was created. The memory
    provider has no schema and is skipped.
    """
    created = []
    with domain.domain_context():
        for provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            _register_tables(domain, provider)
            provider._metadata.create_all(engine)
            created.append(provider.name)
    return created


def drop_db(domain: Domain) -> list[str]:
    """Drop every table known to the SQL providers."""
    dropped = []
    with domain.domain_context():
        for provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            _register_tables(domain, provider)
            provider._metadata.drop_all(engine)
            dropped.append(provider.name)
    return dropped
