from .models import ActionInstance, ActionTemplate

__all__ = [
    "ActionInstance",
    "ActionTemplate",
]
