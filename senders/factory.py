from typing import List

from senders.base import Sender
from senders.console import ConsoleSender
from senders.telegram import TelegramSender
from settings import Settings


def get_senders(settings: Settings, dry_run: bool = False) -> List[Sender]:
    """
    Return the channels a comparison pass should be delivered to.

    Without a Telegram token (or on a dry run) everything is printed to
    stdout instead.  The thread has no transport of its own, so it is
    always printed.
    """
    if dry_run or not settings.telegram_enabled:
        return [ConsoleSender()]
    return [
        TelegramSender(
            token=settings.telegram_api_token,
            chat_id=settings.telegram_chat_id,
            timeout=settings.http_timeout_seconds,
        ),
        ConsoleSender(long_form=False),
    ]
