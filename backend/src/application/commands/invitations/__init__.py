"""Invitation commands."""

from .create_invitation import CreateInvitationCommand, CreateInvitationHandler

__all__ = [
    "CreateInvitationCommand",
    "CreateInvitationHandler",
]
