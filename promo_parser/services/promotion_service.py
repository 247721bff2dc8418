from promo_parser.core.exceptions.promotions import (
    PromotionConflictError,
    PromotionNotFoundError,
    PromotionValidationError,
)
from promo_parser.models.db.promotion import Promotion
from promo_parser.models.dto.promotions import (
    BulkPreviewDTO,
    BulkPreviewRequestDTO,
    PromotionDocument,
    PromotionDTO,
    PromotionWriteDTO,
    RecordNormalizationReportDTO,
)
from promo_parser.models.enums import VEHICLE_MODEL_LABELS
from promo_parser.repositories.promotion_repository import PromotionRepository
from promo_parser.services.bulk_field_merger import BulkFieldMerger
from promo_parser.services.record_normalizer import LegacyRecordNormalizer
from promo_parser.services.slug_generator import SlugGenerator
from promo_parser.utils.logger import logger

DEFAULT_PROMOTION_TITLE = "โปรโมชัน BYD Metromobile"


class PromotionService:
    """
    Service layer orchestrating promotion workflows.

    Every save runs the validate step (title and slug), then the bulk merge
    of pasted benefits and conditions, then persists the result.
    """

    # fields that keep their stored or default value when sent as null
    _NON_NULLABLE_FIELDS: frozenset[str] = frozenset(
        {"title", "campaign_status", "benefits", "conditions", "tags"}
    )

    def __init__(
            self,
            repository: PromotionRepository,
            merger: BulkFieldMerger | None = None,
            slug_generator: SlugGenerator | None = None,
            record_normalizer: LegacyRecordNormalizer | None = None,
            default_title: str = DEFAULT_PROMOTION_TITLE,
    ) -> None:
        self._repository = repository
        self._merger = merger or BulkFieldMerger()
        self._slug_generator = slug_generator or SlugGenerator(repository=repository)
        self._record_normalizer = record_normalizer or LegacyRecordNormalizer()
        self._default_title = default_title

    async def list_promotions(self) -> list[PromotionDTO]:
        """
        Fetch all promotions from storage.
        """

        promotions = await self._repository.list_all()
        logger.info(f"Retrieved {len(promotions)} promotions from storage")

        return [promotion.to_dto() for promotion in promotions]

    async def get_promotion(self, promotion_id: int) -> PromotionDTO:
        promotion = await self._get_or_raise(promotion_id=promotion_id)
        return promotion.to_dto()

    async def get_promotion_by_slug(self, slug: str) -> PromotionDTO:
        promotion = await self._repository.find_by_slug(slug=slug)
        if promotion is None:
            raise PromotionNotFoundError(detail=f"Promotion with slug '{slug}' not found.")
        return promotion.to_dto()

    async def create_promotion(self, payload: PromotionWriteDTO) -> PromotionDTO:
        """
        Validate, merge pasted content and persist a new promotion.
        """

        logger.debug(f"Creating promotion: model='{payload.model_slug}'")

        document = PromotionDocument.model_validate(self._changes(payload=payload))
        document = await self._prepare(document=document, stored_slug=None)

        promotion = Promotion()
        promotion.apply_document(document=document)

        saved = await self._repository.create(promotion=promotion)
        logger.info(f"Created promotion with id={saved.id}, slug='{saved.slug}'")

        return saved.to_dto()

    async def update_promotion(self, promotion_id: int, payload: PromotionWriteDTO) -> PromotionDTO:
        """
        Apply payload changes to a stored promotion and persist it.

        Fields missing from the payload keep their stored values; pasted
        content is appended after the stored benefits and conditions.
        """

        promotion = await self._get_or_raise(promotion_id=promotion_id)
        stored = promotion.to_document()

        document = PromotionDocument.model_validate(
            {**stored.model_dump(), **self._changes(payload=payload)}
        )
        document = await self._prepare(document=document, stored_slug=stored.slug)

        promotion.apply_document(document=document)
        saved = await self._repository.update(promotion=promotion)
        logger.info(f"Updated promotion with id={saved.id}")

        return saved.to_dto()

    async def delete_promotion(self, promotion_id: int) -> None:
        promotion = await self._get_or_raise(promotion_id=promotion_id)
        await self._repository.delete(promotion=promotion)
        logger.info(f"Deleted promotion with id={promotion_id}")

    def preview_bulk(self, payload: BulkPreviewRequestDTO) -> BulkPreviewDTO:
        """
        Run the bulk merge on pasted content without storing anything.
        """

        document = PromotionDocument(
            benefits=payload.benefits,
            conditions=payload.conditions,
            benefits_html=payload.benefits_html,
            benefits_bulk=payload.benefits_bulk,
            conditions_bulk=payload.conditions_bulk,
        )
        merged = self._merger.merge(document=document)

        return BulkPreviewDTO(
            benefits=merged.benefits,
            conditions=merged.conditions,
            new_benefits=len(merged.benefits) - len(payload.benefits),
            new_conditions=len(merged.conditions) - len(payload.conditions),
        )

    async def normalize_stored_records(self) -> RecordNormalizationReportDTO:
        """
        Convert legacy benefit and condition records of every stored promotion.
        """

        promotions = await self._repository.list_all()
        report = RecordNormalizationReportDTO()

        for promotion in promotions:
            benefits = promotion.benefits or []
            conditions = promotion.conditions or []

            if not self._record_normalizer.needs_migration(benefits=benefits, conditions=conditions):
                report.skipped += 1
                continue

            promotion.benefits = self._record_normalizer.normalize_benefits(benefits=benefits)
            promotion.conditions = self._record_normalizer.normalize_conditions(conditions=conditions)
            await self._repository.update(promotion=promotion)

            report.migrated += 1
            report.migrated_ids.append(promotion.id)
            logger.info(f"Normalized records of promotion id={promotion.id}")

        logger.info(
            f"Record normalization complete: migrated={report.migrated}, skipped={report.skipped}"
        )
        return report

    async def _prepare(self, document: PromotionDocument, stored_slug: str | None) -> PromotionDocument:
        """
        Run the validate step and the bulk merge on a document.

        :param document: incoming promotion state
        :param stored_slug: slug already persisted for this promotion
        :return: document ready to be persisted
        """

        if document.start_date and document.end_date and document.end_date < document.start_date:
            raise PromotionValidationError(detail="End date cannot be earlier than start date.")

        title = document.title.strip() if document.title else ""
        slug = await self._resolve_slug(document=document, stored_slug=stored_slug)

        validated = document.model_copy(
            update={"title": title or self._generate_title(model_slug=document.model_slug), "slug": slug}
        )
        return self._merger.merge(document=validated)

    async def _resolve_slug(self, document: PromotionDocument, stored_slug: str | None) -> str | None:
        """
        Pick the slug: an explicit one, the stored one, or a generated one.
        """

        requested = "-".join(document.slug.lower().split()) if document.slug else ""

        if requested and requested != stored_slug:
            taken = await self._repository.find_by_slug(slug=requested, exclude_id=document.id)
            if taken is not None:
                raise PromotionConflictError(detail=f"Slug '{requested}' is already in use.")
            return requested

        if requested or stored_slug:
            return requested or stored_slug

        if not document.model_slug:
            return None

        candidate = self._slug_generator.build_candidate(
            model_slug=document.model_slug,
            reference_date=document.start_date or document.end_date,
        )
        slug = await self._slug_generator.resolve(candidate=candidate, exclude_id=document.id)
        logger.debug(f"Generated slug '{slug}' from candidate '{candidate}'")
        return slug

    def _generate_title(self, model_slug: str | None) -> str:
        if not model_slug:
            return self._default_title
        label = VEHICLE_MODEL_LABELS.get(model_slug, model_slug)
        return f"โปรโมชัน {label}"

    def _changes(self, payload: PromotionWriteDTO) -> dict:
        return {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if not (key in self._NON_NULLABLE_FIELDS and value is None)
        }

    async def _get_or_raise(self, promotion_id: int) -> Promotion:
        promotion = await self._repository.get(promotion_id=promotion_id)
        if promotion is None:
            raise PromotionNotFoundError(detail=f"Promotion with id={promotion_id} not found.")
        return promotion
