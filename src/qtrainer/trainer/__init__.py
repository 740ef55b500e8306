from .agent_trainer import AgentTrainer

__all__ = ["AgentTrainer"]
