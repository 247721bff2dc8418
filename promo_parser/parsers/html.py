import re
from collections.abc import Iterator

from bs4 import BeautifulSoup

from promo_parser.parsers.normalizer import TextNormalizer


class TableRowExtractor:
    """
    Read the data rows of an HTML table fragment.
    """

    def __init__(self, normalizer: TextNormalizer | None = None) -> None:
        self._normalizer = normalizer or TextNormalizer()

    def extract_rows(self, html: str) -> Iterator[tuple[str, ...]]:
        """
        Yield the normalized cell texts of every non-header row.

        Rows holding a ``<th>`` are header rows and are skipped. The
        generator is consumed once; call again to start over.

        :param html: table markup, usually copied from the vendor page
        :return: iterator of cell tuples in document order
        """

        if not html:
            return

        soup = BeautifulSoup(html, "html.parser")

        for row in soup.find_all("tr"):
            if row.find("th") is not None:
                continue

            yield tuple(
                self._normalizer.normalize(value=cell.decode_contents())
                for cell in row.find_all("td", recursive=False)
            )


class ConditionSectionExtractor:
    """
    Read numbered condition paragraphs (sections 3.x and 4.x) from HTML.
    """

    _SECTION_MARKER = re.compile(r"[34]\.[0-9]+\.?\s*")

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        min_length: int = 10,
    ) -> None:
        self._normalizer = normalizer or TextNormalizer()
        self._min_length = min_length

    def extract_conditions(self, html: str) -> list[str]:
        """
        Collect condition texts from paragraphs starting with a section number.

        :param html: page fragment containing ``<p>`` paragraphs
        :return: condition texts with the section number removed
        """

        if not html:
            return []

        soup = BeautifulSoup(html, "html.parser")
        conditions: list[str] = []

        for paragraph in soup.find_all("p"):
            content = paragraph.decode_contents().lstrip()
            marker = self._SECTION_MARKER.match(content)
            if not marker:
                continue

            text = self._normalizer.normalize(value=content[marker.end():])
            if len(text) > self._min_length:
                conditions.append(text)

        return conditions
