"""
Persistence Layer - Database implementations.

Contains repository implementations for domain ports:
- prisma_*_repository.py → PostgreSQL via Prisma (import the module directly;
  it needs the generated Prisma client)
- in_memory_repositories.py → process-local tables for development and tests
"""

from src.infrastructure.persistence.in_memory_repositories import (
    InMemoryDatabase,
    InMemoryMessageRepository,
    InMemoryInvitationRepository,
    InMemoryJobRepository,
    InMemoryCompanyRepository,
    InMemoryCandidateProfileRepository,
)

__all__ = [
    "InMemoryDatabase",
    "InMemoryMessageRepository",
    "InMemoryInvitationRepository",
    "InMemoryJobRepository",
    "InMemoryCompanyRepository",
    "InMemoryCandidateProfileRepository",
]
