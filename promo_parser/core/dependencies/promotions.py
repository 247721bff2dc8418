from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from promo_parser.config import settings
from promo_parser.core.database import get_session
from promo_parser.core.dependencies.parsers import get_bulk_field_merger
from promo_parser.repositories.promotion_repository import PromotionRepository
from promo_parser.services.bulk_field_merger import BulkFieldMerger
from promo_parser.services.promotion_service import PromotionService
from promo_parser.services.slug_generator import SlugGenerator


async def get_promotion_repository(session: AsyncSession = Depends(get_session)) -> PromotionRepository:
    """
    Provide promotion repository bound to the current session.
    """

    return PromotionRepository(session=session)


async def get_promotion_service(
        repository: PromotionRepository = Depends(get_promotion_repository),
        merger: BulkFieldMerger = Depends(get_bulk_field_merger),
) -> PromotionService:
    """
    Provide promotion service with slug generation backed by the repository.
    """

    return PromotionService(
        repository=repository,
        merger=merger,
        slug_generator=SlugGenerator(
            repository=repository,
            max_suffix=settings.promotions.slug_max_suffix,
        ),
        default_title=settings.promotions.default_title,
    )
