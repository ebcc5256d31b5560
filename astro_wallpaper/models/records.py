"""
Pydantic schemas for provider wire payloads.

All models use extra="ignore"; NASA responses carry many fields we never read.
"""

from pydantic import BaseModel, ConfigDict, Field


class MarsPhoto(BaseModel):
    """One rover photo record."""

    model_config = ConfigDict(extra="ignore")

    img_src: str = Field(description="Absolute URL of the photo")


class MarsPhotos(BaseModel):
    """Rover photo listing for one earth date."""

    model_config = ConfigDict(extra="ignore")

    photos: list[MarsPhoto] = Field(default_factory=list)


class EpicImage(BaseModel):
    """One EPIC natural-color record."""

    model_config = ConfigDict(extra="ignore")

    image: str = Field(description="Image identifier, e.g. epic_1b_20240307112233")
    date: str = Field(description='Capture timestamp, "YYYY-MM-DD HH:MM:SS"')

    @property
    def date_path(self) -> str:
        """Calendar path fragment for the archive ("2024-03-07 ..." -> "2024/03/07")."""
        return self.date.split(" ")[0].replace("-", "/")


class EpicRecords(BaseModel):
    """Most recent EPIC natural-color records (the endpoint returns a bare array)."""

    model_config = ConfigDict(extra="ignore")

    records: list[EpicImage] = Field(default_factory=list)


class GatewayError(BaseModel):
    """api.nasa.gov gateway error detail."""

    model_config = ConfigDict(extra="ignore")

    code: str = ""
    message: str = ""


class ApiErrorBody(BaseModel):
    """Structured error payloads: {"msg": ...} or {"error": {"code", "message"}}."""

    model_config = ConfigDict(extra="ignore")

    msg: str | None = None
    error: GatewayError | None = None

    @property
    def message(self) -> str:
        if self.msg:
            return self.msg
        if self.error is not None:
            return self.error.message or self.error.code
        return ""
