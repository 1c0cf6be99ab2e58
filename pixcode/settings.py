from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="PIXCODE_", extra="ignore")

    # Defaults offered by the CLI prompts
    pix_key: str = ""
    pix_merchant_name: str = ""
    pix_merchant_city: str = ""

    qr_renderer: str = "png"
    qr_box_size: int = 10
    qr_border: int = 2
    qr_error_correction: str = "M"

    output_dir: str = "./qrcodes"

    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
