import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from condofee.models.resident import VehicleCategory

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="CONDOFEE_", extra="ignore")

    db_backend: str = "sqlite"
    db_path: str = "condofee.db"
    db_url: str = ""

    log_level: str = "INFO"
    log_json: bool = False

    timezone: str = "Asia/Ho_Chi_Minh"

    # Flat monthly parking rates, not read from the fee's unit amount
    car_tariff: int = 1200000
    other_vehicle_tariff: int = 70000

    def vehicle_tariffs(self) -> dict[VehicleCategory, int]:
        tariffs = {category: self.other_vehicle_tariff for category in VehicleCategory}
        tariffs[VehicleCategory.CAR] = self.car_tariff
        return tariffs


settings = Settings()
