from rendering.bar import progress_bar
from rendering.formatter import NumberFormatter
from rendering.telegram import render_long_form
from rendering.twitter import render_short_form

__all__ = [
    "progress_bar",
    "NumberFormatter",
    "render_long_form",
    "render_short_form",
]
