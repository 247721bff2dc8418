from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from promo_parser.models.db.promotion import Promotion


class PromotionRepository:
    """
    Repository layer for promotion persistence.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Promotion]:
        """
        Retrieve promotions by priority (lowest first), then newest start date.

        :return: list of promotion rows
        """

        statement = select(Promotion).order_by(
            Promotion.priority.asc().nulls_last(),
            Promotion.start_date.desc().nulls_last(),
            Promotion.id.asc(),
        )
        result = await self._session.execute(statement)
        return list(result.scalars().all())

    async def get(self, promotion_id: int) -> Promotion | None:
        """
        Fetch a promotion by primary key.

        :return: promotion row or None
        """

        return await self._session.get(Promotion, promotion_id)

    async def find_by_slug(self, slug: str, exclude_id: int | None = None) -> Promotion | None:
        """
        Fetch a promotion holding the slug, ignoring the given id.

        :param slug: slug to look up
        :param exclude_id: id of the promotion being saved
        :return: first matching promotion or None
        """

        statement = select(Promotion).where(Promotion.slug == slug)
        if exclude_id is not None:
            statement = statement.where(Promotion.id != exclude_id)

        result = await self._session.execute(statement.limit(1))
        return result.scalars().first()

    async def create(self, promotion: Promotion) -> Promotion:
        """
        Persist a new promotion.

        :return: saved promotion row
        """

        self._session.add(promotion)
        await self._session.commit()
        await self._session.refresh(promotion)
        return promotion

    async def update(self, promotion: Promotion) -> Promotion:
        """
        Commit changes made to a loaded promotion.

        :return: refreshed promotion row
        """

        await self._session.commit()
        await self._session.refresh(promotion)
        return promotion

    async def delete(self, promotion: Promotion) -> None:
        """
        Remove a promotion together with its benefits and conditions.
        """

        await self._session.delete(promotion)
        await self._session.commit()
