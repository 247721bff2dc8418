from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from promo_parser.models.dto.promotions import BenefitDTO, ConditionDTO
from promo_parser.models.enums import BenefitCategory
from promo_parser.parsers.classifier import KeywordClassifier
from promo_parser.parsers.normalizer import TextNormalizer
from promo_parser.parsers.values import ValueExtractor
from promo_parser.utils.logger import logger


@dataclass(frozen=True, slots=True)
class ParsedBenefit:
    """
    Benefit produced by a parser, before it is given a sort position.
    """

    category: BenefitCategory
    description: str
    title: str | None = None
    value: str | None = None

    def to_record(self, sort: int) -> BenefitDTO:
        return BenefitDTO(
            category=self.category,
            title=self.title,
            description=self.description,
            value=self.value,
            sort=sort,
        )


@dataclass(frozen=True, slots=True)
class ParsedCondition:
    """
    Condition text produced by a parser, before it is given a sort position.
    """

    text: str

    def to_record(self, sort: int) -> ConditionDTO:
        return ConditionDTO(text=self.text, sort=sort)


@dataclass(slots=True)
class BulkParseResult:
    """
    Benefits and conditions extracted from one pasted field.
    """

    benefits: list[ParsedBenefit] = field(default_factory=list)
    conditions: list[ParsedCondition] = field(default_factory=list)


class BaseBulkParser(ABC):
    """
    Base parser for editor-pasted promotion copy.

    Holds the shared normalizer, classifier and value extractor and wraps
    the concrete parsing steps so that a failure in one of them degrades to
    an empty result instead of failing the save.
    """

    # lines or sections this short are noise, not content
    MIN_TEXT_LENGTH: int = 10

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        classifier: KeywordClassifier | None = None,
        extractor: ValueExtractor | None = None,
    ) -> None:
        self._normalizer = normalizer or TextNormalizer()
        self._classifier = classifier or KeywordClassifier()
        self._extractor = extractor or ValueExtractor()
        self._parser_name = self.__class__.__name__

    def extract_benefits(self, text: str) -> list[ParsedBenefit]:
        """
        Parse benefits from pasted text.

        :param text: raw pasted content
        :return: parsed benefits in input order, empty on failure
        """

        try:
            benefits = self.parse_benefits(text=text)
        except Exception as e:
            logger.error(f"[{self._parser_name}] Benefit parsing failed: {e}")
            return []

        logger.debug(f"[{self._parser_name}] Extracted {len(benefits)} benefits")
        return benefits

    def extract_conditions(self, text: str) -> list[ParsedCondition]:
        """
        Parse conditions from pasted text.

        :param text: raw pasted content
        :return: parsed conditions in input order, empty on failure
        """

        try:
            conditions = self.parse_conditions(text=text)
        except Exception as e:
            logger.error(f"[{self._parser_name}] Condition parsing failed: {e}")
            return []

        logger.debug(f"[{self._parser_name}] Extracted {len(conditions)} conditions")
        return conditions

    def run(self, text: str) -> BulkParseResult:
        """
        Extract both benefits and conditions from the same content.

        :param text: raw pasted content
        :return: combined parse result
        """

        return BulkParseResult(
            benefits=self.extract_benefits(text=text),
            conditions=self.extract_conditions(text=text),
        )

    def build_benefit(self, description: str, title: str | None = None) -> ParsedBenefit:
        """
        Classify and extract the value for a benefit.

        The title decides the category when present; the value is looked up
        in the description first since it usually carries the figure.
        """

        value = self._extractor.extract(text=description)
        if value is None and title:
            value = self._extractor.extract(text=title)

        return ParsedBenefit(
            category=self._classifier.classify(text=title if title else description),
            title=title,
            description=description,
            value=value,
        )

    @abstractmethod
    def parse_benefits(self, text: str) -> list[ParsedBenefit]:
        """
        Parse benefit entries from content.

        :param text: raw pasted content
        :return: parsed benefits
        """

    @abstractmethod
    def parse_conditions(self, text: str) -> list[ParsedCondition]:
        """
        Parse condition entries from content.

        :param text: raw pasted content
        :return: parsed conditions
        """
