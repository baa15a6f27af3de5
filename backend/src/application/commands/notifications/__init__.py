"""Notification commands."""

from .notify_invitation import NotifyInvitationCommand, NotifyInvitationHandler

__all__ = [
    "NotifyInvitationCommand",
    "NotifyInvitationHandler",
]
