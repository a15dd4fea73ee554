"""Library configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings, overridable through ``PIXELBLUR_*`` environment variables."""

    # Unsharp mask
    UNSHARP_BLUR_RADIUS: int = 3  # Blur radius, independent of the caller's radius
    UNSHARP_BLUR_STEPS: int = 3
    UNSHARP_AMOUNT_SCALE: float = 250.0  # corr = diff * amount / scale

    # Blur
    DEFAULT_BLUR_METHOD: str = "triangular"

    # Limits
    MAX_BUFFER_SIZE: int | None = None  # Max raw buffer bytes, None = unlimited

    model_config = {"env_prefix": "PIXELBLUR_"}


settings = Settings()
