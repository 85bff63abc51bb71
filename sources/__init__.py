from sources.ministry import FetchError, MinistryClient
from sources.store import ReportStore

__all__ = [
    "FetchError",
    "MinistryClient",
    "ReportStore",
]
