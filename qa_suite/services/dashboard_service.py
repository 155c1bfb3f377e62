# /qa_suite/services/dashboard_service.py

# --- Core Imports ---
from collections import Counter

from ..models.dashboard_model import GenerationStats, Achievement
from ..models.tool_model import FeatureType
from .database_service import DatabaseService

MINUTES_SAVED_PER_GENERATION = 15
CHARACTERS_PER_LINE = 80

# (name, description, feature type counted or None for all, threshold)
ACHIEVEMENTS = [
    ("First Steps", "Generate your first output", None, 1),
    ("Getting Started", "Generate 5 outputs", None, 5),
    ("Power User", "Generate 10 outputs", None, 10),
    ("Test Master", "Generate 5 test suites", FeatureType.TEST_GENERATOR.value, 5),
    ("Bug Hunter", "Fix 3 errors", FeatureType.ERROR_EXPLAINER.value, 3),
    ("Productivity Pro", "Generate 25 outputs", None, 25),
]


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def _evaluate_achievements(total: int, by_type: dict) -> list:
    achievements = []
    for name, description, feature_type, threshold in ACHIEVEMENTS:
        count = total if feature_type is None else by_type.get(feature_type, 0)
        achievements.append(Achievement(name=name, description=description, unlocked=count >= threshold))
    return achievements


# --- Core Public Function ---

def get_generation_stats(db: DatabaseService, session_id: str) -> GenerationStats:
    """
    Aggregates every generation the session owns into the stats view.

    The reduction runs over the full, unpaginated history in Python.

    Args:
        db: An instance of the DatabaseService, provided by dependency injection.
        session_id: The browser session whose history is summarised.

    Returns:
        A GenerationStats Pydantic object with raw totals and derived figures.
    """
    try:
        all_generations = db.get_generations(session_id)

        total = len(all_generations)
        by_type = dict(Counter(g.feature_type for g in all_generations))
        total_input_length = sum(g.input_length or 0 for g in all_generations)
        total_output_length = sum(g.output_length or 0 for g in all_generations)
        total_time = sum(g.generation_time_ms or 0 for g in all_generations)
        avg_generation_time = _round_half_up(total_time / total) if total else 0

        achievements = _evaluate_achievements(total, by_type)
        locked = [a for a in achievements if not a.unlocked]

        return GenerationStats(
            total=total,
            by_type=by_type,
            total_input_length=total_input_length,
            total_output_length=total_output_length,
            avg_generation_time=avg_generation_time,
            time_saved_hours=_round_half_up(total * MINUTES_SAVED_PER_GENERATION / 60 * 10) / 10,
            lines_generated=_round_half_up(total_output_length / CHARACTERS_PER_LINE),
            achievements=achievements,
            unlocked_count=len(achievements) - len(locked),
            next_achievement=locked[0] if locked else None,
        )
    except Exception as e:
        print(f"ERROR calculating generation stats for session {session_id}: {e}")
        # Re-raise the exception to be handled as a 500 error in the router layer.
        raise
