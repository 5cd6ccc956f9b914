"""
Invite Pydantic models
"""
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from enum import Enum

from core.config import MAX_CUSTOM_MESSAGE_LENGTH, PNG_DATA_URI_PREFIX

_http_url = TypeAdapter(HttpUrl)


class EventCategory(str, Enum):
    NIKKAH = "NIKKAH"
    MEHNDI = "MEHNDI"
    BARAAT = "BARAAT"
    WALIMA = "WALIMA"
    BIRTHDAY = "BIRTHDAY"


class InviteLanguage(str, Enum):
    EN = "EN"
    UR = "UR"
    BOTH = "BOTH"


class CamelModel(BaseModel):
    """Snake_case in Python and Mongo, camelCase on the wire"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )


class InviteCreate(CamelModel):
    """Create invite request"""
    event_category: EventCategory
    event_title: str = Field(min_length=1)
    primary_names: str = Field(min_length=1)
    event_date: str = Field(min_length=1)  # YYYY-MM-DD
    event_time: str = Field(min_length=1)  # HH:MM
    venue_name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    maps_url: Optional[str] = None
    custom_message: Optional[str] = Field(default=None, max_length=MAX_CUSTOM_MESSAGE_LENGTH)
    language: InviteLanguage

    @field_validator("maps_url")
    @classmethod
    def check_maps_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            _http_url.validate_python(value)
        except ValidationError:
            raise ValueError("mapsUrl must be a valid http(s) URL")
        # keep the link exactly as entered
        return value

    @model_validator(mode="after")
    def check_event_datetime(self):
        try:
            self.event_datetime
        except ValueError:
            raise ValueError(
                f"eventDate '{self.event_date}' and eventTime '{self.event_time}' do not form a valid date"
            )
        return self

    @property
    def event_datetime(self) -> datetime:
        """eventDate and eventTime combined into one naive timestamp"""
        return datetime.strptime(f"{self.event_date}T{self.event_time}", "%Y-%m-%dT%H:%M")


class InviteCreated(BaseModel):
    slug: str


# Full invite record as stored and served
class Invite(CamelModel):
    """Full invite with all details"""
    slug: str
    event_category: EventCategory
    template_key: str
    event_title: str
    primary_names: str
    date: datetime
    time: str
    venue_name: str
    address: str
    maps_url: Optional[str] = None
    custom_message: Optional[str] = None
    language: InviteLanguage
    view_count: int = 0
    created_at: str
    updated_at: Optional[str] = None


class PdfExportRequest(CamelModel):
    """Rendered invite card as a PNG data URI"""
    image_data: str

    @field_validator("image_data")
    @classmethod
    def check_png_data_uri(cls, value: str) -> str:
        if not value.startswith(PNG_DATA_URI_PREFIX):
            raise ValueError(f"imageData must start with '{PNG_DATA_URI_PREFIX}'")
        return value
