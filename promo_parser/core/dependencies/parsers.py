from functools import lru_cache

from promo_parser.parsers.plain_text import PlainTextParser
from promo_parser.parsers.rever import ReverHtmlParser
from promo_parser.services.bulk_field_merger import BulkFieldMerger


@lru_cache
def get_bulk_field_merger() -> BulkFieldMerger:
    """
    Provide a shared bulk merger; the parsers hold no per-request state.

    :return: merger wired with the Rever HTML and plain text parsers
    """

    return BulkFieldMerger(html_parser=ReverHtmlParser(), text_parser=PlainTextParser())
