"""Text Role Classifier Configuration."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from textrole.utils.scale import ScaleModel


class PixelThresholds(BaseModel):
    """Classification thresholds converted to pixels for one given page."""

    model_config = ConfigDict(frozen=True)

    max_right_dx: int
    max_center_dx: int
    max_short_length: int
    max_tiny_length: int
    max_staff_dy: int
    min_title_height: int


class ThresholdConfig(BaseModel):
    """
    Classification thresholds, expressed in interline units.

    Built once at process start and shared read-only by every
    classification, whatever the page resolution.
    """

    model_config = ConfigDict(frozen=True)

    max_right_dx: float = Field(
        default=2,
        ge=0,
        description="Maximum horizontal distance on the right end of the staff",
    )
    max_center_dx: float = Field(
        default=30,
        ge=0,
        description="Maximum horizontal distance around center of page",
    )
    max_short_length: float = Field(
        default=35,
        ge=0,
        description="Maximum length for a short sentence (no lyrics)",
    )
    max_tiny_length: float = Field(
        default=2,
        ge=0,
        description="Maximum length for a tiny sentence (no lyrics)",
    )
    max_staff_dy: float = Field(
        default=7,
        ge=0,
        description="Maximum distance above staff for a direction",
    )
    min_title_height: float = Field(
        default=3,
        ge=0,
        description="Minimum height for a title text",
    )

    def to_pixels(self, scale: ScaleModel) -> PixelThresholds:
        """Convert every threshold with the scale of the page at hand."""
        return PixelThresholds(
            max_right_dx=scale.to_pixels(self.max_right_dx),
            max_center_dx=scale.to_pixels(self.max_center_dx),
            max_short_length=scale.to_pixels(self.max_short_length),
            max_tiny_length=scale.to_pixels(self.max_tiny_length),
            max_staff_dy=scale.to_pixels(self.max_staff_dy),
            min_title_height=scale.to_pixels(self.min_title_height),
        )


class Settings(BaseSettings):
    """Text Role Classifier Configuration"""

    model_config = SettingsConfigDict(
        env_prefix="TEXTROLE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Service info
    service_name: str = "textrole"
    service_version: str = "1.0.0"

    # Thresholds (interline units), e.g. TEXTROLE_THRESHOLDS__MAX_TINY_LENGTH
    thresholds: ThresholdConfig = Field(default_factory=ThresholdConfig)

    # Performance
    max_workers: int = 4  # Threads for page-wide classification

    # Logging
    log_level: str = "INFO"
    log_json: bool = True


settings = Settings()
