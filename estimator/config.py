from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "BOQ Estimator"
    LOG_LEVEL: str = "INFO"

    # Floor for a recipe's base quantity
    EPSILON: float = 1e-9

    # GST split: 9% state + 9% central
    SGST_RATE: float = 0.09
    CGST_RATE: float = 0.09

    # Purchase round-off: "ceiling" | "two_decimals" | "none"
    ROUND_OFF_POLICY: str = "ceiling"
    PURCHASE_INCREMENT: float = 1.0

    # Which quantity the rates multiply: "scaled" | "round_off"
    BILLING_BASIS: str = "scaled"

    SQMT_PER_SQFT: float = 10.76

    class Config:
        env_file = ".env"


settings = Settings()
