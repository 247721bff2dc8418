import re

from promo_parser.parsers.base import BaseBulkParser, ParsedBenefit, ParsedCondition
from promo_parser.parsers.html import ConditionSectionExtractor, TableRowExtractor
from promo_parser.utils.logger import logger


class ReverHtmlParser(BaseBulkParser):
    """
    Parser for benefit tables and condition paragraphs copied from Rever pages.

    Each table row is ``<td>title</td><td>description</td>``; conditions are
    the paragraphs numbered 3.x and 4.x below the table.
    """

    # header rows the vendor renders as ordinary cells
    _PRICE_HEADER: str = "ราคาจำหน่าย"
    _BENEFITS_HEADER: str = "สิทธิประโยชน์พิเศษ"

    _DIGIT = re.compile(r"[0-9]")

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._rows = TableRowExtractor(normalizer=self._normalizer)
        self._sections = ConditionSectionExtractor(
            normalizer=self._normalizer,
            min_length=self.MIN_TEXT_LENGTH,
        )

    def parse_benefits(self, text: str) -> list[ParsedBenefit]:
        benefits: list[ParsedBenefit] = []

        for cells in self._rows.extract_rows(html=text):
            benefit = self._interpret_row(cells=cells)
            if benefit:
                benefits.append(benefit)

        return benefits

    def parse_conditions(self, text: str) -> list[ParsedCondition]:
        return [
            ParsedCondition(text=condition)
            for condition in self._sections.extract_conditions(html=text)
        ]

    def _interpret_row(self, cells: tuple[str, ...]) -> ParsedBenefit | None:
        """
        Turn a table row into a benefit, or None for noise rows.

        :param cells: normalized cell texts of the row
        :return: parsed benefit or None
        """

        if len(cells) < 2:
            return None

        title, description = cells[0], cells[1]

        if not title or not description:
            return None

        if title == self._PRICE_HEADER and not self._DIGIT.search(description):
            logger.debug(f"[{self._parser_name}] Skipping price header row")
            return None

        if title == self._BENEFITS_HEADER and not description:
            return None

        return self.build_benefit(description=description, title=title)
