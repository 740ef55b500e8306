from .training_trace_logger import TrainingTraceLogger

__all__ = ["TrainingTraceLogger"]
