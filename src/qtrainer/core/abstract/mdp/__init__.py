from .base_agent import BaseAgent
from .base_state import BaseState

__all__ = ["BaseAgent", "BaseState"]
