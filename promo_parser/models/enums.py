from enum import Enum


class BenefitCategory(str, Enum):
    """
    Closed set of benefit categories stored on a promotion.
    """

    EARLY_PRICE = "early_price"
    FINANCING = "financing"
    INSURANCE_1Y = "insurance_1y"
    WARRANTY_POWERTRAIN = "warranty_powertrain"
    WARRANTY_VEHICLE = "warranty_vehicle"
    BATTERY_WARRANTY = "battery_warranty"
    ROADSIDE_8Y = "roadside_8y"
    ACCESSORIES_BUNDLE = "accessories_bundle"
    ACCESSORY = "accessory"
    FREEBIE = "freebie"
    CASHBACK = "cashback"
    DISCOUNT = "discount"
    SERVICE = "service"
    SPECIAL = "special"
    OTHER = "other"


class CampaignStatus(str, Enum):
    """
    Publication lifecycle of a promotion campaign.
    """

    ACTIVE = "active"
    UPCOMING = "upcoming"
    EXPIRED = "expired"


# model slug -> display label used for generated titles
VEHICLE_MODEL_LABELS: dict[str, str] = {
    "atto3": "BYD ATTO 3",
    "dolphin": "BYD DOLPHIN",
    "seal": "BYD SEAL",
    "sealion6": "BYD SEALION 6",
    "sealion7": "BYD SEALION 7",
    "m6": "BYD M6",
    "atto2": "BYD ATTO 2",
}
