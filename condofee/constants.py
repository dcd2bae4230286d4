from zoneinfo import ZoneInfo

from condofee.models.fee import FeeType
from condofee.models.resident import VehicleCategory
from condofee.settings import settings

LOCAL_TZ = ZoneInfo(settings.timezone)

# Payment.status value for a payment that has not been settled
UNPAID_STATUS = "not yet paid"

FEE_TYPE_LABELS = {
    FeeType.AREA: "Per m²",
    FeeType.VEHICLE: "Per vehicle",
    FeeType.PER_UNIT: "Per unit",
}

CATEGORY_LABELS = {
    VehicleCategory.CAR: "Car",
    VehicleCategory.MOTORBIKE: "Motorbike",
    VehicleCategory.BICYCLE: "Bicycle",
    VehicleCategory.OTHER: "Other",
}
