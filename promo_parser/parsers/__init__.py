from promo_parser.parsers.base import BaseBulkParser, BulkParseResult, ParsedBenefit, ParsedCondition
from promo_parser.parsers.classifier import BENEFIT_KEYWORD_RULES, KeywordClassifier
from promo_parser.parsers.html import ConditionSectionExtractor, TableRowExtractor
from promo_parser.parsers.normalizer import TextNormalizer
from promo_parser.parsers.plain_text import PlainTextParser
from promo_parser.parsers.rever import ReverHtmlParser
from promo_parser.parsers.values import ValueExtractor

__all__ = [
    "BENEFIT_KEYWORD_RULES",
    "BaseBulkParser",
    "BulkParseResult",
    "ConditionSectionExtractor",
    "KeywordClassifier",
    "ParsedBenefit",
    "ParsedCondition",
    "PlainTextParser",
    "ReverHtmlParser",
    "TableRowExtractor",
    "TextNormalizer",
    "ValueExtractor",
]
