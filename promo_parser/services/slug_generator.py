import time
from collections.abc import Callable
from datetime import date, datetime
from typing import Any, Protocol

from promo_parser.utils.logger import logger


class SlugLookup(Protocol):
    """
    Store capability used to test slug candidates.
    """

    async def find_by_slug(self, slug: str, exclude_id: int | None = None) -> Any | None:
        ...


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class SlugGenerator:
    """
    Build ``<model>-<mon>-<year>`` slugs and make them unique against the store.

    Taken candidates are retried with ``-2`` up to ``-<max_suffix>`` in
    ascending order; when all are taken a millisecond timestamp suffix is used.
    """

    _MONTHS: tuple[str, ...] = (
        "jan", "feb", "mar", "apr", "may", "jun",
        "jul", "aug", "sep", "oct", "nov", "dec",
    )

    def __init__(
        self,
        repository: SlugLookup,
        max_suffix: int = 9,
        clock: Callable[[], int] = _epoch_millis,
    ) -> None:
        self._repository = repository
        self._max_suffix = max_suffix
        self._clock = clock

    def build_candidate(self, model_slug: str, reference_date: date | str | None = None) -> str:
        """
        Compose the base slug from the model and the campaign month.

        :param model_slug: vehicle model identifier, e.g. ``atto3``
        :param reference_date: campaign date; ignored when missing or unparsable
        :return: ``atto3-jan-2025`` or just ``atto3``
        """

        model = model_slug.strip()
        month_year = self.format_month_year(reference_date=reference_date)
        return f"{model}-{month_year}" if month_year else model

    def format_month_year(self, reference_date: date | str | None) -> str | None:
        """
        Format a date as ``jan-2025``.

        :param reference_date: date, datetime or ISO 8601 string
        :return: month-year token or None when no usable date is given
        """

        if reference_date is None:
            return None

        if isinstance(reference_date, str):
            try:
                reference_date = datetime.fromisoformat(reference_date.strip())
            except ValueError:
                return None

        return f"{self._MONTHS[reference_date.month - 1]}-{reference_date.year:04d}"

    async def resolve(self, candidate: str, exclude_id: int | None = None) -> str:
        """
        Return the first unused slug among the candidate and its suffixed variants.

        Store errors are not caught.

        :param candidate: base slug
        :param exclude_id: id of the promotion being saved, ignored in lookups
        :return: unique slug
        """

        if not await self._is_taken(slug=candidate, exclude_id=exclude_id):
            return candidate

        for suffix in range(2, self._max_suffix + 1):
            probe = f"{candidate}-{suffix}"
            if not await self._is_taken(slug=probe, exclude_id=exclude_id):
                logger.debug(f"[SlugGenerator] Slug '{candidate}' taken, using '{probe}'")
                return probe

        fallback = f"{candidate}-{self._clock()}"
        logger.warning(
            f"[SlugGenerator] Suffixes 2-{self._max_suffix} taken for '{candidate}', "
            f"falling back to '{fallback}'"
        )
        return fallback

    async def _is_taken(self, slug: str, exclude_id: int | None) -> bool:
        existing = await self._repository.find_by_slug(slug=slug, exclude_id=exclude_id)
        return existing is not None
