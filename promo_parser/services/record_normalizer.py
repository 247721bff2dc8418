from typing import Any

from promo_parser.models.enums import BenefitCategory


class LegacyRecordNormalizer:
    """
    Upgrade benefit and condition records stored before they were structured.

    Old benefits look like ``{"text": ...}``; old conditions have no ``sort``.
    """

    def needs_migration(self, benefits: list[dict[str, Any]], conditions: list[dict[str, Any]]) -> bool:
        """
        Tell whether stored records still use the legacy shape.
        """

        legacy_benefits = any(
            benefit.get("text") and not benefit.get("description")
            for benefit in benefits
        )
        unsorted_conditions = any(condition.get("sort") is None for condition in conditions)
        return legacy_benefits or unsorted_conditions

    def normalize_benefits(self, benefits: list[dict[str, Any]]) -> list[dict[str, Any]]:
        normalized: list[dict[str, Any]] = []

        for position, benefit in enumerate(benefits, start=1):
            normalized.append(
                {
                    "category": benefit.get("category")
                    or benefit.get("type")
                    or BenefitCategory.OTHER.value,
                    "title": benefit.get("title"),
                    "description": benefit.get("description") or benefit.get("text") or "",
                    "value": benefit.get("value"),
                    "icon": benefit.get("icon"),
                    "sort": benefit.get("sort") or position,
                }
            )

        return normalized

    def normalize_conditions(self, conditions: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [
            {
                "text": condition.get("text") or "",
                "sort": condition.get("sort") or position,
            }
            for position, condition in enumerate(conditions, start=1)
        ]
