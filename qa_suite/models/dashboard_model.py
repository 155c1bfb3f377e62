# /qa_suite/models/dashboard_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field
from typing import Dict, List, Optional

# --- Model Definitions ---

class Achievement(BaseModel):
    name: str
    description: str
    unlocked: bool

class GenerationStats(BaseModel):
    """
    Defines the data contract for the response of the stats endpoint.
    The raw aggregates are summed over every generation the session owns;
    the derived figures feed the "Productivity" cards of the stats view.
    """

    total: int = Field(..., description="Total number of generations for the session.", examples=[12])
    by_type: Dict[str, int] = Field(
        default_factory=dict,
        description="Generation counts keyed by feature type.",
        examples=[{"test-generator": 7, "error-explainer": 5}],
    )
    total_input_length: int = 0
    total_output_length: int = 0
    avg_generation_time: int = Field(0, description="Mean generation time in milliseconds.")

    time_saved_hours: float = Field(0.0, description="Estimated time saved, assuming 15 minutes per generation.")
    lines_generated: int = Field(0, description="Rough line estimate at 80 characters per line.")
    achievements: List[Achievement] = Field(default_factory=list)
    unlocked_count: int = 0
    next_achievement: Optional[Achievement] = None
