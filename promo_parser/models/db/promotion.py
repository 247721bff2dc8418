from datetime import date
from typing import Any

from sqlalchemy import JSON, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from promo_parser.models.db.base import Base, TimestampMixin
from promo_parser.models.dto.promotions import PromotionDocument, PromotionDTO
from promo_parser.models.enums import CampaignStatus


class Promotion(TimestampMixin, Base):
    """
    Database entity representing a vehicle promotion campaign.

    Benefits and conditions are owned by the promotion and stored inline as
    JSON lists, so they are removed together with it.
    """

    __tablename__ = "promotions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(length=255), nullable=False)
    slug: Mapped[str | None] = mapped_column(String(length=255), nullable=True, unique=True, index=True)
    campaign_status: Mapped[str] = mapped_column(
        String(length=16), nullable=False, default=CampaignStatus.ACTIVE.value
    )
    priority: Mapped[int | None] = mapped_column(Integer, nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    model_slug: Mapped[str | None] = mapped_column(String(length=64), nullable=True)
    benefits: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    conditions: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    def apply_document(self, document: PromotionDocument) -> None:
        """
        Copy the persisted fields of a validated, merged document onto the row.

        :param document: promotion document after the save pipeline
        """

        self.title = document.title
        self.slug = document.slug
        self.campaign_status = CampaignStatus(document.campaign_status).value
        self.priority = document.priority
        self.start_date = document.start_date
        self.end_date = document.end_date
        self.model_slug = document.model_slug
        self.benefits = [
            benefit.model_dump(mode="json") for benefit in document.benefits
        ]
        self.conditions = [
            condition.model_dump(mode="json") for condition in document.conditions
        ]
        self.tags = list(document.tags)

    def to_document(self) -> PromotionDocument:
        """
        Build the save-pipeline document from the stored row.

        :return: document with empty scratch fields
        """

        return PromotionDocument(
            id=self.id,
            title=self.title,
            slug=self.slug,
            campaign_status=self.campaign_status,
            priority=self.priority,
            start_date=self.start_date,
            end_date=self.end_date,
            model_slug=self.model_slug,
            benefits=self.benefits or [],
            conditions=self.conditions or [],
            tags=self.tags or [],
        )

    def to_dto(self) -> PromotionDTO:
        """
        Convert database model to DTO.

        :return: DTO representation of the promotion
        """

        return PromotionDTO(
            id=self.id,
            title=self.title,
            slug=self.slug,
            campaign_status=self.campaign_status,
            priority=self.priority,
            start_date=self.start_date,
            end_date=self.end_date,
            model_slug=self.model_slug,
            benefits=self.benefits or [],
            conditions=self.conditions or [],
            tags=self.tags or [],
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def __repr__(self) -> str:
        return f"Promotion(id={self.id}, slug={self.slug})"
