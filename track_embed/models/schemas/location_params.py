from pydantic import BaseModel, field_validator

from track_embed.config.settings import SUPPORTED_LOCATIONS

class LocationParams(BaseModel):
    location: str | None = None

    @field_validator("location")
    def normalise_location(cls, v: str | None) -> str | None:
        # An empty `?location=` means a global search
        return v.lower() if v else None

    @property
    def is_supported(self) -> bool:
        return self.location is None or self.location in SUPPORTED_LOCATIONS

    @property
    def country_name(self) -> str | None:
        return SUPPORTED_LOCATIONS.get(self.location) if self.location else None
