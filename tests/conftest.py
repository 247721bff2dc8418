import os

# the API modules build settings and the engine at import time
os.environ.setdefault("DB_USER", "promo")
os.environ.setdefault("DB_PASSWORD", "promo")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_PORT", "5432")
os.environ.setdefault("DB_NAME", "promotions_test")

import pytest

from promo_parser.models.db.promotion import Promotion
from promo_parser.services.promotion_service import PromotionService
from promo_parser.services.slug_generator import SlugGenerator


class FakePromotionRepository:
    """In-memory stand-in for PromotionRepository."""

    def __init__(self) -> None:
        self.rows: dict[int, Promotion] = {}
        self.slug_lookups: list[str] = []
        self._next_id = 1

    def add(self, promotion: Promotion) -> Promotion:
        promotion.id = self._next_id
        self._next_id += 1
        self.rows[promotion.id] = promotion
        return promotion

    async def list_all(self) -> list[Promotion]:
        return list(self.rows.values())

    async def get(self, promotion_id: int) -> Promotion | None:
        return self.rows.get(promotion_id)

    async def find_by_slug(self, slug: str, exclude_id: int | None = None) -> Promotion | None:
        self.slug_lookups.append(slug)
        for row in self.rows.values():
            if row.slug == slug and row.id != exclude_id:
                return row
        return None

    async def create(self, promotion: Promotion) -> Promotion:
        return self.add(promotion)

    async def update(self, promotion: Promotion) -> Promotion:
        return promotion

    async def delete(self, promotion: Promotion) -> None:
        self.rows.pop(promotion.id, None)


REVER_TABLE = """
<table>
  <thead><tr><th>รายการ</th><th>รายละเอียด</th></tr></thead>
  <tbody>
    <tr><td>ราคาจำหน่าย</td><td>ติดต่อผู้แทนจำหน่าย</td></tr>
    <tr><td>ราคาพิเศษ</td><td><b>699,900</b> บาท</td></tr>
    <tr><td>ประกันภัย 1 ปี</td><td>คุ้มครอง 100,000 บาท</td></tr>
    <tr><td>สิทธิประโยชน์พิเศษ</td><td></td></tr>
    <tr><td>รับประกันแบตเตอรี่</td><td>8 ปี หรือ 160,000 กม.</td></tr>
    <tr><td>ฟรี</td></tr>
  </tbody>
</table>
"""

REVER_CONDITIONS = """
<p>1. เงื่อนไขทั่วไปของรายการส่งเสริมการขาย</p>
<p>3.1 สงวนสิทธิ์เฉพาะลูกค้าที่จองรถภายในระยะเวลาที่กำหนด</p>
<p>3.2. ราคาและสิทธิประโยชน์อาจเปลี่ยนแปลง&nbsp;โดยไม่ต้องแจ้งให้ทราบล่วงหน้า</p>
<p>4.1 สั้น</p>
<p>  4.2 <strong>ไม่สามารถ</strong>แลกเปลี่ยนเป็นเงินสดได้ทุกกรณี</p>
<p>5.1 เงื่อนไขนอกขอบเขตที่ไม่ควรถูกนำมาใช้งาน</p>
"""


@pytest.fixture
def rever_table() -> str:
    return REVER_TABLE


@pytest.fixture
def rever_conditions() -> str:
    return REVER_CONDITIONS


@pytest.fixture
def fake_repository() -> FakePromotionRepository:
    return FakePromotionRepository()


@pytest.fixture
def promotion_service(fake_repository) -> PromotionService:
    return PromotionService(
        repository=fake_repository,
        slug_generator=SlugGenerator(repository=fake_repository, clock=lambda: 1700000000000),
    )
