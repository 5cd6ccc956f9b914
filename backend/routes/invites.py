"""
Invite API Routes
"""
from fastapi import APIRouter, HTTPException, Depends, Response
from fastapi.responses import StreamingResponse
import asyncio
import io
import logging

from core.config import Settings
from core.dependencies import get_invite_store, get_settings, require_slug
from models.invite import Invite, InviteCreate, InviteCreated, PdfExportRequest
from services.images import InvalidImageData, decode_png_data_uri, render_image_pdf, generate_qr_code_png
from services.invites import InviteStore
from utils.helpers import build_invite_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/invites", tags=["invites"])


@router.post("", response_model=InviteCreated, status_code=201)
async def create_invite(
    data: InviteCreate,
    store: InviteStore = Depends(get_invite_store)
):
    """Create a new invite and return its slug"""
    invite = await store.create(data)
    return InviteCreated(slug=invite["slug"])


@router.get("/{slug}", response_model=Invite)
async def get_invite(
    slug: str = Depends(require_slug),
    store: InviteStore = Depends(get_invite_store)
):
    """Get a single invite by slug"""
    invite = await store.find_by_slug(slug)

    if not invite:
        raise HTTPException(status_code=404, detail="Invite not found")

    return Invite(**invite)


@router.post("/{slug}/view", status_code=204)
async def track_invite_view(
    slug: str = Depends(require_slug),
    store: InviteStore = Depends(get_invite_store)
):
    """Count one view of an invite; unknown slugs are acknowledged too"""
    await store.increment_view(slug)
    return Response(status_code=204)


@router.post("/{slug}/export/pdf")
async def export_invite_pdf(
    data: PdfExportRequest,
    slug: str = Depends(require_slug)
):
    """Render the client-captured invite card into an A4 PDF"""
    try:
        image_bytes = decode_png_data_uri(data.image_data)
        pdf_bytes = await asyncio.to_thread(render_image_pdf, image_bytes)
    except InvalidImageData as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Exported PDF for invite {slug} ({len(pdf_bytes)} bytes)")

    return StreamingResponse(
        io.BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="invite-{slug}.pdf"'}
    )


@router.get("/{slug}/qr-code")
async def get_invite_qr_code(
    slug: str = Depends(require_slug),
    store: InviteStore = Depends(get_invite_store),
    settings: Settings = Depends(get_settings)
):
    """Generate QR code for the invite's share link"""
    invite = await store.find_by_slug(slug)
    if not invite:
        raise HTTPException(status_code=404, detail="Invite not found")

    invite_url = build_invite_url(settings.frontend_url, slug)
    img_buffer = io.BytesIO(generate_qr_code_png(invite_url))

    return StreamingResponse(
        img_buffer,
        media_type="image/png",
        headers={"Content-Disposition": f"attachment; filename=invite_qr_{slug}.png"}
    )
