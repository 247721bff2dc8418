from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from promo_parser.models.enums import BenefitCategory, CampaignStatus


class BenefitDTO(BaseModel):
    """
    Structured benefit item attached to a promotion.
    """

    category: BenefitCategory = Field(default=BenefitCategory.FREEBIE)
    title: str | None = Field(default=None)
    description: str = Field(...)
    value: str | None = Field(default=None, description="Extracted amount, percent or years token")
    icon: str | None = Field(default=None)
    sort: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_shape(cls, data: Any) -> Any:
        """
        Accept records stored as ``{type, text}`` before benefits were structured.
        """

        if not isinstance(data, dict):
            return data

        upgraded = dict(data)
        if not upgraded.get("description") and upgraded.get("text"):
            upgraded["description"] = upgraded["text"]
        if "category" not in upgraded and upgraded.get("type"):
            upgraded["category"] = upgraded["type"]
        upgraded.pop("text", None)
        upgraded.pop("type", None)
        return upgraded


class ConditionDTO(BaseModel):
    """
    Eligibility or legal clause attached to a promotion.
    """

    text: str = Field(...)
    sort: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(from_attributes=True)


class BulkFieldsDTO(BaseModel):
    """
    Scratch fields pasted by an editor; consumed and cleared on every save.
    """

    benefits_html: str | None = Field(default=None, alias="benefitsHtml")
    benefits_bulk: str | None = Field(default=None, alias="benefitsBulk")
    conditions_bulk: str | None = Field(default=None, alias="conditionsBulk")

    model_config = ConfigDict(populate_by_name=True)


class PromotionWriteDTO(BulkFieldsDTO):
    """
    Input payload for creating or updating promotions.

    Collections left unset keep their stored value on update.
    """

    title: str | None = Field(default=None)
    slug: str | None = Field(default=None)
    campaign_status: CampaignStatus = Field(default=CampaignStatus.ACTIVE)
    priority: int | None = Field(default=None, description="Lower number means higher priority")
    start_date: date | None = Field(default=None)
    end_date: date | None = Field(default=None)
    model_slug: str | None = Field(default=None)
    benefits: list[BenefitDTO] | None = Field(default=None)
    conditions: list[ConditionDTO] | None = Field(default=None)
    tags: list[str] | None = Field(default=None)


class PromotionDocument(BulkFieldsDTO):
    """
    Promotion state passed through the validate and merge steps of a save.
    """

    id: int | None = Field(default=None)
    title: str = Field(default="")
    slug: str | None = Field(default=None)
    campaign_status: CampaignStatus = Field(default=CampaignStatus.ACTIVE)
    priority: int | None = Field(default=None)
    start_date: date | None = Field(default=None)
    end_date: date | None = Field(default=None)
    model_slug: str | None = Field(default=None)
    benefits: list[BenefitDTO] = Field(default_factory=list)
    conditions: list[ConditionDTO] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    def scratch_fields(self) -> dict[str, str | None]:
        return {
            "benefits_html": self.benefits_html,
            "benefits_bulk": self.benefits_bulk,
            "conditions_bulk": self.conditions_bulk,
        }


class PromotionDTO(BaseModel):
    """
    External representation of a stored promotion.
    """

    id: int = Field(...)
    title: str = Field(...)
    slug: str | None = Field(default=None)
    campaign_status: CampaignStatus = Field(...)
    priority: int | None = Field(default=None)
    start_date: date | None = Field(default=None)
    end_date: date | None = Field(default=None)
    model_slug: str | None = Field(default=None)
    benefits: list[BenefitDTO] = Field(default_factory=list)
    conditions: list[ConditionDTO] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = Field(default=None)
    updated_at: datetime | None = Field(default=None)

    model_config = ConfigDict(from_attributes=True)


class BulkPreviewRequestDTO(BulkFieldsDTO):
    """
    Scratch fields plus the collections they would be appended to.
    """

    benefits: list[BenefitDTO] = Field(default_factory=list)
    conditions: list[ConditionDTO] = Field(default_factory=list)


class BulkPreviewDTO(BaseModel):
    """
    Result of running the bulk merge without persisting it.
    """

    benefits: list[BenefitDTO] = Field(default_factory=list)
    conditions: list[ConditionDTO] = Field(default_factory=list)
    new_benefits: int = Field(default=0)
    new_conditions: int = Field(default=0)


class RecordNormalizationReportDTO(BaseModel):
    """
    Outcome of converting stored legacy benefit and condition records.
    """

    migrated: int = Field(default=0)
    skipped: int = Field(default=0)
    migrated_ids: list[int] = Field(default_factory=list)
