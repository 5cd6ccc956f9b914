# Models package
from .invite import (
    EventCategory, InviteLanguage,
    InviteCreate, InviteCreated, Invite,
    PdfExportRequest
)
