"""Normalized, AI-ready credit report payload."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from bureau_normalizer.parsing.blocks import NormalizedRecord

_MODEL_CONFIG = ConfigDict(populate_by_name=True, frozen=True)


class Identification(BaseModel):
    """Who the report is about."""

    model_config = _MODEL_CONFIG

    name: Any = None
    document: Any = None
    birth_date: Any = Field(default=None, alias="birthDate")
    tax_status: Any = Field(default=None, alias="taxStatus")
    consumer_status: Any = Field(default=None, alias="consumerStatus")


class Location(BaseModel):
    """Registered address."""

    model_config = _MODEL_CONFIG

    address: Optional[str] = None
    city: Any = None
    state: Any = None
    zip_code: Any = Field(default=None, alias="zipCode")


class FinancialSummary(BaseModel):
    """Aggregated counters; principal and guarantor exposure are summed."""

    model_config = _MODEL_CONFIG

    total_debts_qty: int = Field(default=0, alias="totalDebtsQty")
    total_debts_value: float = Field(default=0.0, alias="totalDebtsValue")
    protests_qty: int = Field(default=0, alias="protestsQty")
    protests_value: float = Field(default=0.0, alias="protestsValue")
    legal_actions_qty: int = Field(default=0, alias="legalActionsQty")
    bounced_checks_qty: int = Field(default=0, alias="bouncedChecksQty")


class NegativeDetails(BaseModel):
    """Per-record negative history. Values are kept as reported (e.g. "1.000,00")."""

    model_config = _MODEL_CONFIG

    debts: list[NormalizedRecord] = Field(default_factory=list)
    protests: list[NormalizedRecord] = Field(default_factory=list)
    civil_actions: list[NormalizedRecord] = Field(default_factory=list, alias="civilActions")
    bankruptcy: list[NormalizedRecord] = Field(default_factory=list)


class AiContextPayload(BaseModel):
    """
    Compact view of one bureau response, consumed verbatim by the prompt stage.
    The field set is fixed: sparse input yields empty lists and None scalars.
    """

    model_config = _MODEL_CONFIG

    identification: Identification = Field(default_factory=Identification)
    location: Location = Field(default_factory=Location)
    financial_summary: FinancialSummary = Field(
        default_factory=FinancialSummary, alias="financialSummary"
    )
    risk_score: list[NormalizedRecord] = Field(default_factory=list, alias="riskScore")
    negative_details: NegativeDetails = Field(
        default_factory=NegativeDetails, alias="negativeDetails"
    )
    corporate_participation: list[NormalizedRecord] = Field(
        default_factory=list, alias="corporateParticipation"
    )

    def to_dict(self) -> dict[str, Any]:
        """Full fixed shape with camelCase keys; absent scalars stay as None."""
        return self.model_dump(mode="json", by_alias=True)

    def to_prompt_json(self, *, drop_empty: bool = True, indent: Optional[int] = None) -> str:
        """
        JSON text for the prompt stage.
        drop_empty omits None scalars; empty lists are kept ("no records" is a signal).
        """
        return self.model_dump_json(by_alias=True, exclude_none=drop_empty, indent=indent)
