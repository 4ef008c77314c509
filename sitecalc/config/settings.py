from pydantic_settings import BaseSettings

from sitecalc.pricing.commission import CommissionRates


class Settings(BaseSettings):
    supabase_url: str = ""
    supabase_key: str = ""

    total_commission_rate: float = 0.10
    contractor_fee_rate: float = 0.03
    renter_fee_rate: float = 0.07

    cors_origins: list[str] = ["http://localhost:8081", "http://localhost:19006"]
    log_level: str = "INFO"

    class Config:
        env_file = ".env"

    def commission_rates(self) -> CommissionRates:
        """Build validated commission rates from the configured values."""
        return CommissionRates(
            total=self.total_commission_rate,
            contractor=self.contractor_fee_rate,
            renter=self.renter_fee_rate,
        )
