"""
Presentation Layer - HTTP routes and the chat socket.

- api/: FastAPI routers (/ws, /auth, /messages, /invitations, /metrics)
- dependencies/: auth dependencies resolving the caller's AuthIdentity
"""
