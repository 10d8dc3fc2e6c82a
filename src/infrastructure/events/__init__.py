"""
Infrastructure Event Layer.

ListenerGroup fuer gebuendelte Listener-Registrierung mit atomarer Freigabe.
"""

from infrastructure.events.listener_group import ListenerGroup

__all__ = [
    'ListenerGroup',
]
