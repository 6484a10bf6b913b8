"""Goal-based fitness tips and exercise suggestions."""

from dataclasses import dataclass

from fitness_point.domain.fitness import Exercise, FitnessContent, FitnessTip

DEFAULT_GOAL = "maintain"


@dataclass
class FitnessService:
    """Serves static guidance content for a fitness goal."""

    content: FitnessContent

    def tips(self, goal: str | None) -> tuple[str, list[FitnessTip]]:
        """Return the requested goal and its tips, falling back to maintain."""
        resolved = goal or DEFAULT_GOAL
        tips = self.content.tips.get(resolved.lower()) or self.content.tips.get(
            DEFAULT_GOAL, []
        )
        return resolved, list(tips)

    def exercises(self, goal: str | None) -> tuple[str, list[Exercise]]:
        """Return the requested goal and its exercises, falling back to maintain."""
        resolved = goal or DEFAULT_GOAL
        exercises = self.content.exercises.get(
            resolved.lower()
        ) or self.content.exercises.get(DEFAULT_GOAL, [])
        return resolved, list(exercises)
