"""Request models for the HTTP API."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, FiniteFloat


class ProfileFields(BaseModel):
    """Body-metric fields as sent by clients."""

    age: int | None = Field(default=None)
    weight: FiniteFloat | None = Field(default=None)
    height: FiniteFloat | None = Field(default=None)
    sex: str | None = Field(
        default=None, validation_alias=AliasChoices("gender", "sex")
    )
    activity_level: str | None = None
    goal: str | None = None

    def to_profile_fields(self) -> dict[str, object]:
        """Map request names to domain profile field names."""
        return {
            "age": self.age,
            "weight_kg": self.weight,
            "height_cm": self.height,
            "sex": self.sex,
            "activity_level": self.activity_level,
            "goal": self.goal,
        }


class SuggestFoodsRequest(BaseModel):
    """Payload for a meal suggestion request."""

    model_config = ConfigDict(populate_by_name=True)

    target_calories: int | FiniteFloat | None = Field(
        default=None, alias="targetCalories"
    )
    dietary_preferences: list[str] | None = Field(
        default=None, alias="dietaryPreferences"
    )
