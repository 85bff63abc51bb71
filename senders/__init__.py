from senders.base import SendError, Sender
from senders.factory import get_senders

__all__ = [
    "SendError",
    "Sender",
    "get_senders",
]
