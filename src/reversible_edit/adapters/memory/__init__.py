from .sequence import EditableSequence

__all__ = [
    "EditableSequence",
]
