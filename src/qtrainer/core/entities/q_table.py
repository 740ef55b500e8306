from pydantic import BaseModel, Field
from typing import Optional


class QTableStats(BaseModel):
    q_entries: int = Field(
        ..., ge=0, description="Number of stored (state, action) values"
    )
    seen_states: int = Field(
        ..., ge=0, description="Number of distinct states updated from"
    )
    min_value: Optional[float] = Field(
        None, description="Smallest stored value, None for an empty table"
    )
    max_value: Optional[float] = Field(
        None, description="Largest stored value, None for an empty table"
    )
