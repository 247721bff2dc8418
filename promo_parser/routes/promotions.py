from fastapi import APIRouter, Depends, Response, status

from promo_parser.core.dependencies.promotions import get_promotion_service
from promo_parser.models.dto.promotions import (
    BulkPreviewDTO,
    BulkPreviewRequestDTO,
    PromotionDTO,
    PromotionWriteDTO,
    RecordNormalizationReportDTO,
)
from promo_parser.services.promotion_service import PromotionService

router = APIRouter(prefix="/promotions", tags=["Promotions"])


@router.get("", summary="List promotions", response_model=list[PromotionDTO])
async def list_promotions(
        promotion_service: PromotionService = Depends(get_promotion_service),
) -> list[PromotionDTO]:
    """
    Retrieve every stored promotion, highest priority first.

    :param promotion_service: service that loads promotions from storage.
    :return: collection of stored promotions.
    """

    return await promotion_service.list_promotions()


@router.get("/slug/{slug}", summary="Get promotion by slug", response_model=PromotionDTO)
async def get_promotion_by_slug(
        slug: str,
        promotion_service: PromotionService = Depends(get_promotion_service),
) -> PromotionDTO:
    """
    Retrieve a promotion by its public slug.

    :param slug: URL identifier of the promotion.
    :param promotion_service: service that loads promotions from storage.
    :return: matching promotion.
    """

    return await promotion_service.get_promotion_by_slug(slug=slug)


@router.get("/{promotion_id}", summary="Get promotion", response_model=PromotionDTO)
async def get_promotion(
        promotion_id: int,
        promotion_service: PromotionService = Depends(get_promotion_service),
) -> PromotionDTO:
    """
    Retrieve a promotion by id.
    """

    return await promotion_service.get_promotion(promotion_id=promotion_id)


@router.post("", summary="Create promotion", response_model=PromotionDTO, status_code=status.HTTP_201_CREATED)
async def create_promotion(
        payload: PromotionWriteDTO,
        promotion_service: PromotionService = Depends(get_promotion_service),
) -> PromotionDTO:
    """
    Create a promotion from structured fields and pasted vendor content.

    A blank title is generated from the vehicle model and, when no slug is
    given, a unique one is derived from the model and campaign month. Pasted
    HTML tables and plain-text lines in ``benefitsHtml``, ``benefitsBulk`` and
    ``conditionsBulk`` are converted into benefits and conditions; the
    scratch fields themselves are never stored.

    :param payload: promotion definition including optional pasted content.
    :param promotion_service: service that validates, merges and persists.
    :return: newly created promotion.
    """

    return await promotion_service.create_promotion(payload=payload)


@router.put("/{promotion_id}", summary="Update promotion", response_model=PromotionDTO)
async def update_promotion(
        promotion_id: int,
        payload: PromotionWriteDTO,
        promotion_service: PromotionService = Depends(get_promotion_service),
) -> PromotionDTO:
    """
    Update a promotion and append any pasted content to its records.

    Fields absent from the payload are left unchanged. New benefits and
    conditions are sorted after the stored ones. A stored slug is never
    regenerated.

    :param promotion_id: id of the promotion to update.
    :param payload: changed fields and optional pasted content.
    :param promotion_service: service that validates, merges and persists.
    :return: updated promotion.
    """

    return await promotion_service.update_promotion(promotion_id=promotion_id, payload=payload)


@router.delete("/{promotion_id}", summary="Delete promotion", status_code=status.HTTP_204_NO_CONTENT)
async def delete_promotion(
        promotion_id: int,
        promotion_service: PromotionService = Depends(get_promotion_service),
) -> Response:
    """
    Delete a promotion together with its benefits and conditions.
    """

    await promotion_service.delete_promotion(promotion_id=promotion_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/bulk/preview", summary="Preview pasted content", response_model=BulkPreviewDTO)
async def preview_bulk(
        payload: BulkPreviewRequestDTO,
        promotion_service: PromotionService = Depends(get_promotion_service),
) -> BulkPreviewDTO:
    """
    Show the benefits and conditions pasted content would produce.

    Nothing is stored; the response lists the given collections with the
    parsed records appended and the number of records added to each.

    :param payload: pasted content and the collections it extends.
    :param promotion_service: service running the bulk merge.
    :return: merged collections and counts of new records.
    """

    return promotion_service.preview_bulk(payload=payload)


@router.post(
    "/maintenance/normalize-records",
    summary="Normalize legacy benefit and condition records",
    response_model=RecordNormalizationReportDTO,
)
async def normalize_records(
        promotion_service: PromotionService = Depends(get_promotion_service),
) -> RecordNormalizationReportDTO:
    """
    Convert benefits stored as plain text and conditions without sort order.

    :param promotion_service: service that rewrites stored records.
    :return: counts and ids of migrated promotions.
    """

    return await promotion_service.normalize_stored_records()
