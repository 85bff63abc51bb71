from abc import ABC, abstractmethod

from dto.summary import Summary


class SendError(Exception):
    """A channel refused or failed to deliver a message."""


class Sender(ABC):
    """
    Base class for message channels.

    A sender receives the fully rendered ``Summary`` and only deals with
    transport; it picks whichever form (long or short) suits its channel.
    Senders holding a connection release it in ``close()``.
    """

    name: str = "sender"

    @abstractmethod
    def send(self, summary: Summary) -> None:
        """Deliver *summary*.  Raises ``SendError`` on failure."""
        ...

    def close(self) -> None:
        pass

    def __enter__(self) -> "Sender":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
