import re


class ValueExtractor:
    """
    Pull the headline figure out of a benefit string.

    Tries a baht amount, then a percentage, then a number of years, and
    returns the first hit as text so unit suffixes survive storage.
    """

    _CURRENCY = re.compile(r"([0-9]{1,3}(?:,[0-9]{3})+|[0-9]+)\s*บาท")
    _PERCENT = re.compile(r"([0-9]+(?:\.[0-9]+)?)\s*%")
    _YEARS = re.compile(r"([0-9]+)\s*ปี")

    def extract(self, text: str | None) -> str | None:
        """
        Extract a value token from text.

        :param text: text to search
        :return: ``"699900"``, ``"1.88%"``, ``"8y"`` style token or None
        """

        if not text:
            return None

        match = self._CURRENCY.search(text)
        if match:
            return match.group(1).replace(",", "")

        match = self._PERCENT.search(text)
        if match:
            return f"{match.group(1)}%"

        match = self._YEARS.search(text)
        if match:
            return f"{match.group(1)}y"

        return None
