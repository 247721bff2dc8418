"""
Tests for ordered keyword classification of benefit text.
"""

import re

import pytest

from promo_parser.models.enums import BenefitCategory
from promo_parser.parsers.classifier import BENEFIT_KEYWORD_RULES, KeywordClassifier


class TestKeywordClassifier:
    """First matching rule decides the category."""

    @pytest.fixture
    def classifier(self):
        return KeywordClassifier()

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("ราคาพิเศษ", BenefitCategory.EARLY_PRICE),
            ("ราคาจำหน่าย", BenefitCategory.EARLY_PRICE),
            ("ดาวน์เริ่มต้น 0%", BenefitCategory.FINANCING),
            ("ดอกเบี้ย 1.88%", BenefitCategory.FINANCING),
            ("ประกันภัย 1 ปี", BenefitCategory.INSURANCE_1Y),
            ("ฟรี พ.ร.บ.", BenefitCategory.INSURANCE_1Y),
            ("รับประกันระบบขับเคลื่อน 8 ปี", BenefitCategory.WARRANTY_POWERTRAIN),
            ("รับประกันคุณภาพรถ 6 ปี", BenefitCategory.WARRANTY_VEHICLE),
            ("รับประกันแบตเตอรี่ 8 ปี", BenefitCategory.BATTERY_WARRANTY),
            ("Blade battery warranty", BenefitCategory.BATTERY_WARRANTY),
            ("บริการช่วยเหลือฉุกเฉิน", BenefitCategory.ROADSIDE_8Y),
            ("AC Portable Charger", BenefitCategory.ACCESSORIES_BUNDLE),
            ("อุปกรณ์ VtoL", BenefitCategory.ACCESSORIES_BUNDLE),
            ("ฟรีพรมปูพื้น", BenefitCategory.FREEBIE),
            ("ฟิล์มกรองแสง", BenefitCategory.ACCESSORY),
            ("ฟิล์ม CERAMIC", BenefitCategory.ACCESSORY),
            ("ฟรีค่าจดทะเบียน", BenefitCategory.FREEBIE),
        ],
    )
    def test_known_keywords(self, classifier, text, expected):
        assert classifier.classify(text=text) == expected

    def test_defaults_to_freebie(self, classifier):
        assert classifier.classify(text="ลด 50,000 บาท") == BenefitCategory.FREEBIE

    def test_matching_is_case_insensitive(self, classifier):
        assert classifier.classify(text="charger 7kW") == BenefitCategory.ACCESSORIES_BUNDLE

    def test_earlier_rule_wins_when_several_match(self, classifier):
        # price wording (rule 1) and financing wording (rule 2) together
        assert classifier.classify(text="ราคาพิเศษ ผ่อน 0%") == BenefitCategory.EARLY_PRICE

    def test_rule_order_is_preserved(self):
        categories = [category for _, category in BENEFIT_KEYWORD_RULES]
        assert categories[:3] == [
            BenefitCategory.EARLY_PRICE,
            BenefitCategory.FINANCING,
            BenefitCategory.INSURANCE_1Y,
        ]
        assert categories.index(BenefitCategory.WARRANTY_POWERTRAIN) < categories.index(
            BenefitCategory.BATTERY_WARRANTY
        )

    def test_custom_rules_follow_list_position(self):
        classifier = KeywordClassifier(
            rules=(
                (re.compile("ฟรี"), BenefitCategory.SPECIAL),
                (re.compile("ฟรีพรม"), BenefitCategory.FREEBIE),
            ),
            default=BenefitCategory.OTHER,
        )

        assert classifier.classify(text="ฟรีพรม") == BenefitCategory.SPECIAL
        assert classifier.classify(text="ส่วนลด") == BenefitCategory.OTHER
