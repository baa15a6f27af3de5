"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/     → Data persistence interfaces
- token_service.py  → Credential mint/verify primitives
"""

from src.domain.ports.token_service import TokenService

__all__ = ["TokenService"]
