from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

########################################################-----########################################################

class LearningSettings(BaseModel):
    alpha: float = Field(..., ge=0.0, le=1.0, description="Learning rate")
    gamma: float = Field(..., ge=0.0, le=1.0, description="Discount factor")
    initial_value: float = Field(0.0, description="Value assumed for missing table entries")
    terminal_value: float = Field(
        0.0, description="Best next value assumed when the next state is terminal"
    )


class ExplorationSettings(BaseModel):
    strategy: Literal["random", "epsilon_greedy"] = "random"
    epsilon: float = Field(0.1, ge=0.0, le=1.0, description="Exploration rate for epsilon_greedy")
    seed: Optional[int] = Field(None, description="Seed of the exploration random generator")


class TerminationSettings(BaseModel):
    strategy: Literal["fixed_iterations", "sink_states", "time_limit"] = "fixed_iterations"
    iterations: Optional[int] = Field(None, ge=1, description="Step count for fixed_iterations")
    seconds: Optional[float] = Field(None, gt=0.0, description="Wall-clock budget for time_limit")

    @model_validator(mode="after")
    def _check_strategy_parameters(self) -> "TerminationSettings":
        if self.strategy == "fixed_iterations" and self.iterations is None:
            raise ValueError("'iterations' is required for the fixed_iterations strategy")
        if self.strategy == "time_limit" and self.seconds is None:
            raise ValueError("'seconds' is required for the time_limit strategy")
        return self


class TrainingSettings(BaseModel):
    learning: LearningSettings
    exploration: ExplorationSettings = Field(default_factory=ExplorationSettings)
    termination: TerminationSettings

########################################################-----########################################################

class TrainingSummary(BaseModel):
    steps: int = Field(0, ge=0, description="Number of value updates performed")
    stopped_early: bool = Field(
        False, description="True when training ended because no action could be explored"
    )
    q_entries: int = Field(0, ge=0)
    seen_states: int = Field(0, ge=0)
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: Optional[datetime] = None

########################################################-----########################################################
