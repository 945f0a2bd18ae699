from .submission import Submission
from .response import Response

__all__ = [
    "Submission",
    "Response",
]
