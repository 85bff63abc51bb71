import sys
from typing import Optional, TextIO

from dto.summary import Summary
from senders.base import Sender


class ConsoleSender(Sender):
    """
    Prints the summary instead of sending it.

    With ``long_form=False`` only the thread is printed: that is the
    fallback for the short form while Telegram carries the long form.
    """

    name = "console"

    def __init__(self, stream: Optional[TextIO] = None, long_form: bool = True) -> None:
        self._stream = stream
        self._long_form = long_form

    def send(self, summary: Summary) -> None:
        out = self._stream or sys.stdout
        if self._long_form:
            out.write("telegram: ------\n" + summary.long_form + "\n------\n")
        for post in summary.short_form:
            out.write("thread: ------\n" + post + "\n------\n")
