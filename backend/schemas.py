"""
NPV Sweep Pydantic Schemas

Defines request/response models for the FastAPI REST API.
Pydantic validates all incoming data and serializes outgoing responses.

Architecture:
    - Wire format is camelCase JSON; Python attributes are snake_case.
      CamelModel maps between the two and accepts either on input.
    - Sweep schemas: body of POST /api/npv/sweep and the points it returns
    - NPV engine schemas: body of POST /api/npv/calculate and its result

Only types are validated here. Rate bounds and increment are deliberately
NOT range-checked: a malformed sweep yields an empty result, not a 422.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .engines.sweep import SweepRequest


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# SWEEP SCHEMAS
# ---------------------------------------------------------------------------

class SweepRequestBody(CamelModel):
    """Request body for a discount-rate sweep."""
    lower_bound_discount_rate: float
    upper_bound_discount_rate: float
    discount_rate_increment: float
    cash_flows: list[float]
    initial_investment: float

    def to_sweep_request(self) -> SweepRequest:
        return SweepRequest(
            lower_rate=self.lower_bound_discount_rate,
            upper_rate=self.upper_bound_discount_rate,
            increment=self.discount_rate_increment,
            principal=self.initial_investment,
            cash_flows=self.cash_flows,
        )


class SweepPoint(CamelModel):
    """One point of the NPV sensitivity curve."""
    discount_rate: float
    npv: float


# ---------------------------------------------------------------------------
# NPV ENGINE SCHEMAS
# ---------------------------------------------------------------------------

class NpvCalculationRequest(CamelModel):
    """Request body for a single NPV calculation.

    Keys are matched case-insensitively, so both `discountRate` and
    `DiscountRate` are accepted.
    """
    initial_investment: float
    discount_rate: float
    cash_flows: list[float] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data):
        if not isinstance(data, dict):
            return data
        aliases = {to_camel(name).lower(): to_camel(name) for name in cls.model_fields}
        return {
            aliases.get(key.lower(), key) if isinstance(key, str) else key: value
            for key, value in data.items()
        }


class NpvCalculationResponse(BaseModel):
    """Result of a single NPV calculation."""
    npv: float = Field(allow_inf_nan=False, strict=True)
