"""Repositories (infrastructure implementations of application ports)."""

from portcullis.infrastructure.persistence.repositories.directory_repo import (
    DirectoryRepository,
    build_upsert_statement,
)

__all__ = ["DirectoryRepository", "build_upsert_statement"]
