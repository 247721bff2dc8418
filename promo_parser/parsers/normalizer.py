import re


class TextNormalizer:
    """
    Turn an HTML fragment or pasted text into a single clean line.

    Line breaks and ``&nbsp;`` become spaces, remaining tags are dropped,
    ``&amp;`` is decoded and middle dots and soft hyphens are removed.
    Applying it twice gives the same result as applying it once.
    """

    _BREAK_TAG = re.compile(r"<br\s*/?>", re.IGNORECASE)
    _ANY_TAG = re.compile(r"<[^>]+>")
    _WHITESPACE = re.compile(r"\s+")
    # middle dot, soft hyphen
    _DROPPED_CHARS = re.compile("[\u00b7\u00ad]")

    def normalize(self, value: str | None) -> str:
        """
        Strip markup and collapse whitespace.

        :param value: raw text, possibly containing markup
        :return: normalized single-line text
        """

        if not value:
            return ""

        # decoding "&amp;nbsp;" or stripping "<<b>br>" can expose new markup,
        # so repeat until the text stops changing
        text = value
        while True:
            cleaned = self._clean_once(text=text)
            if cleaned == text:
                return cleaned
            text = cleaned

    def _clean_once(self, text: str) -> str:
        text = self._BREAK_TAG.sub(" ", text)
        text = self._ANY_TAG.sub(" ", text)
        text = text.replace("&nbsp;", " ").replace("&amp;", "&")
        text = self._DROPPED_CHARS.sub("", text)
        return self._WHITESPACE.sub(" ", text).strip()
