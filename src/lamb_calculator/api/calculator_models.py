"""Pydantic models for the calculator API payloads."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lamb_calculator.domain.calculator import CalculationResult, HungerLevel

MIN_PEOPLE = 1
MAX_PEOPLE = 50


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CalculationRequest(BaseModel):
    """Calculator request payload, accepted only under its camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel)

    people: int = Field(ge=MIN_PEOPLE, le=MAX_PEOPLE, strict=True)
    hunger_level: HungerLevel


class LambCutPayload(_CamelModel):
    name: str
    amount: str
    icon: str


class CalculationResponse(_CamelModel):
    """Calculator response payload."""

    total_weight: str
    total_description: str
    cuts: list[LambCutPayload]
    serving_tips: list[str]

    @classmethod
    def from_result(cls, result: CalculationResult) -> "CalculationResponse":
        return cls(
            total_weight=result.total_weight,
            total_description=result.total_description,
            cuts=[
                LambCutPayload(name=cut.name, amount=cut.amount, icon=cut.icon)
                for cut in result.cuts
            ],
            serving_tips=list(result.serving_tips),
        )
