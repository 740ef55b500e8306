"""
Termination strategies.
"""

from .any_of import AnyOf
from .fixed_iterations import FixedIterations
from .sink_states import SinkStates
from .time_limit import TimeLimit

__all__ = ["AnyOf", "FixedIterations", "SinkStates", "TimeLimit"]
