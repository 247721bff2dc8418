import re

from promo_parser.models.enums import BenefitCategory

# Order matters: the first matching rule wins, so narrower wording must
# come before the broader rule that would also match it.
BENEFIT_KEYWORD_RULES: tuple[tuple[re.Pattern[str], BenefitCategory], ...] = (
    (re.compile(r"ราคา(จำหน่าย|พิเศษ)?", re.IGNORECASE), BenefitCategory.EARLY_PRICE),
    (re.compile(r"ดาวน์|ดอกเบี้ย|ผ่อน|สินเชื่อ", re.IGNORECASE), BenefitCategory.FINANCING),
    (re.compile(r"ประกันภัย|พ\.ร\.บ\.", re.IGNORECASE), BenefitCategory.INSURANCE_1Y),
    (re.compile(r"รับประกันระบบขับเคลื่อน", re.IGNORECASE), BenefitCategory.WARRANTY_POWERTRAIN),
    (re.compile(r"รับประกันคุณภาพรถ", re.IGNORECASE), BenefitCategory.WARRANTY_VEHICLE),
    (re.compile(r"รับประกันแบตเตอรี่|Battery", re.IGNORECASE), BenefitCategory.BATTERY_WARRANTY),
    (re.compile(r"ช่วยเหลือฉุกเฉิน|24\s*ชั่วโมง\s*\d+\s*ปี", re.IGNORECASE), BenefitCategory.ROADSIDE_8Y),
    (
        re.compile(r"VtoL|สายต่อพ่วง|สายชาร์จ|Charger|AC Portable", re.IGNORECASE),
        BenefitCategory.ACCESSORIES_BUNDLE,
    ),
    (re.compile(r"พรม|ผ้ายาง|กรอบป้าย|ฟิล์มกันรอย", re.IGNORECASE), BenefitCategory.FREEBIE),
    (re.compile(r"ฟิล์ม(กรองแสง|เซรามิก)|XUV|CERAMIC", re.IGNORECASE), BenefitCategory.ACCESSORY),
    (re.compile(r"ค่าจดทะเบียน", re.IGNORECASE), BenefitCategory.FREEBIE),
)


class KeywordClassifier:
    """
    Map benefit text to a category using an ordered list of keyword rules.
    """

    def __init__(
        self,
        rules: tuple[tuple[re.Pattern[str], BenefitCategory], ...] = BENEFIT_KEYWORD_RULES,
        default: BenefitCategory = BenefitCategory.FREEBIE,
    ) -> None:
        self._rules = rules
        self._default = default

    @property
    def rules(self) -> tuple[tuple[re.Pattern[str], BenefitCategory], ...]:
        return self._rules

    def classify(self, text: str) -> BenefitCategory:
        """
        Return the category of the first rule matching anywhere in the text.

        :param text: benefit title or line
        :return: matched category or the default one
        """

        for pattern, category in self._rules:
            if pattern.search(text):
                return category

        return self._default
