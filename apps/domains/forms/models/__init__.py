from .form import Form
from .question import Question
from .option import Option
from .attachment import Attachment

__all__ = [
    "Form",
    "Question",
    "Option",
    "Attachment",
]
