from pydantic import BaseModel
from typing import List


class Summary(BaseModel):
    """The rendered output of one comparison pass."""
    report_name: str
    long_form: str
    short_form: List[str] = []
