import re

from promo_parser.models.dto.promotions import PromotionDocument
from promo_parser.parsers.base import ParsedBenefit, ParsedCondition
from promo_parser.parsers.plain_text import PlainTextParser
from promo_parser.parsers.rever import ReverHtmlParser
from promo_parser.utils.logger import logger


class BulkFieldMerger:
    """
    Convert a promotion's pasted scratch fields into benefits and conditions.

    ``merge`` is a pure transform: it returns a new document whose
    collections have the parsed records appended after the stored ones and
    whose scratch fields are cleared, leaving the input untouched.
    """

    _HTML_SHAPE = re.compile(r"<(table|tr|td|th|p|div)", re.IGNORECASE)

    def __init__(
        self,
        html_parser: ReverHtmlParser | None = None,
        text_parser: PlainTextParser | None = None,
    ) -> None:
        self._html_parser = html_parser or ReverHtmlParser()
        self._text_parser = text_parser or PlainTextParser()

    def merge(self, document: PromotionDocument) -> PromotionDocument:
        """
        Parse the scratch fields and append the results to the document.

        :param document: promotion with stored collections and pasted input
        :return: updated copy with merged collections and empty scratch fields
        """

        new_benefits: list[ParsedBenefit] = []
        new_conditions: list[ParsedCondition] = []

        if self._has_content(value=document.benefits_html):
            parsed = self._html_parser.run(text=document.benefits_html)
            new_benefits.extend(parsed.benefits)
            new_conditions.extend(parsed.conditions)
            logger.info(
                f"[BulkFieldMerger] Parsed {len(parsed.benefits)} benefits and "
                f"{len(parsed.conditions)} conditions from HTML"
            )

        if self._has_content(value=document.benefits_bulk):
            parser = (
                self._html_parser
                if self.is_html(text=document.benefits_bulk)
                else self._text_parser
            )
            additional = parser.extract_benefits(text=document.benefits_bulk)
            new_benefits.extend(additional)
            logger.info(
                f"[BulkFieldMerger] Parsed {len(additional)} additional benefits from bulk text"
            )

        if self._has_content(value=document.conditions_bulk):
            additional = self._text_parser.extract_conditions(text=document.conditions_bulk)
            new_conditions.extend(additional)
            logger.info(
                f"[BulkFieldMerger] Parsed {len(additional)} conditions from bulk text"
            )

        update: dict = {name: None for name in document.scratch_fields()}

        if new_benefits:
            offset = self._sort_offset(records=document.benefits)
            update["benefits"] = [
                *document.benefits,
                *(
                    benefit.to_record(sort=offset + position)
                    for position, benefit in enumerate(new_benefits, start=1)
                ),
            ]

        if new_conditions:
            offset = self._sort_offset(records=document.conditions)
            update["conditions"] = [
                *document.conditions,
                *(
                    condition.to_record(sort=offset + position)
                    for position, condition in enumerate(new_conditions, start=1)
                ),
            ]

        return document.model_copy(update=update)

    def is_html(self, text: str) -> bool:
        """
        Check whether pasted text looks like table or paragraph markup.
        """

        return bool(self._HTML_SHAPE.search(text))

    @staticmethod
    def _sort_offset(records: list) -> int:
        # new sorts must exceed both the record count and the highest stored sort
        return max(len(records), max((record.sort or 0 for record in records), default=0))

    @staticmethod
    def _has_content(value: str | None) -> bool:
        return bool(value and value.strip())
