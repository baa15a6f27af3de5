"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Database implementations (Prisma and in-memory repositories)
- cache/: Redis caching implementations (CachedMessageRepository)
- realtime/: Socket registry and push (ConnectionRegistry, NotificationDispatcher)
- security/: Credential implementation (JwtTokenService)

Prisma repositories are imported from their own modules so the generated
Prisma client is only required when that backend is configured.
"""
