from .all_settled import all_settled

__all__ = ("all_settled",)
