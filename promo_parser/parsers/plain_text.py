import re

from promo_parser.parsers.base import BaseBulkParser, ParsedBenefit, ParsedCondition


class PlainTextParser(BaseBulkParser):
    """
    Parser for pasted plain text where each line is one benefit or condition.
    """

    # "-", "•", en/em dash, middle dot, or "1." / "1)" / "1]" numbering
    _LINE_MARKER = re.compile(r"^\s*[-•–—·]\s*|^\s*\d+[.)\]](?!\d)\s*")

    def parse_benefits(self, text: str) -> list[ParsedBenefit]:
        return [self.build_benefit(description=line) for line in self.split_lines(text=text)]

    def parse_conditions(self, text: str) -> list[ParsedCondition]:
        return [ParsedCondition(text=line) for line in self.split_lines(text=text)]

    def split_lines(self, text: str) -> list[str]:
        """
        Split text into content lines without their bullet or number markers.

        :param text: pasted text
        :return: lines longer than the minimum length
        """

        lines: list[str] = []

        for raw_line in (text or "").split("\n"):
            line = self._LINE_MARKER.sub("", raw_line, count=1).strip()
            if len(line) > self.MIN_TEXT_LENGTH:
                lines.append(line)

        return lines
