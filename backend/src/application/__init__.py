"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS): relay, notify, invitations, open conversation
- queries/   → Read operations (CQRS): recent messages, unread count
- dto/       → Data Transfer Objects and socket event frames
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain ports plus the realtime NotificationDispatcher
- No HTTP/framework code here
- Coordinates entities, repositories and socket pushes
"""
