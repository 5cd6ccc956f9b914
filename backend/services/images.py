"""
Image processing services
PNG data URI decoding, PDF page assembly and QR codes.
"""
import base64
import binascii
import io

import qrcode
from PIL import Image

from core.config import A4_PAGE_SIZE, PDF_DPI, PNG_DATA_URI_PREFIX


class InvalidImageData(ValueError):
    """Image payload is not a usable base64 PNG"""


def decode_png_data_uri(data_uri: str) -> bytes:
    """Strip the PNG data URI prefix and base64-decode the payload"""
    if not data_uri or not data_uri.startswith(PNG_DATA_URI_PREFIX):
        raise InvalidImageData("Invalid imageData")

    encoded = data_uri[len(PNG_DATA_URI_PREFIX):]
    if not encoded:
        raise InvalidImageData("Empty imageData")
    try:
        return base64.b64decode(encoded, validate=True)
    except binascii.Error:
        raise InvalidImageData("imageData is not valid base64")


def _to_rgb(img: Image.Image) -> Image.Image:
    # Flatten transparency onto white; PDF pages have no alpha
    if img.mode in ('RGBA', 'LA', 'P'):
        img = img.convert('RGBA')
        background = Image.new('RGB', img.size, (255, 255, 255))
        background.paste(img, mask=img.split()[-1])
        return background
    if img.mode != 'RGB':
        return img.convert('RGB')
    return img


def render_image_pdf(png_bytes: bytes) -> bytes:
    """
    Render a PNG onto a single A4 page with no margin.

    The image is stretched to the full page width and height, so the aspect
    ratio is not preserved. Returns the complete PDF document.
    """
    page_px = (
        round(A4_PAGE_SIZE[0] / 72 * PDF_DPI),
        round(A4_PAGE_SIZE[1] / 72 * PDF_DPI),
    )

    try:
        with Image.open(io.BytesIO(png_bytes)) as img:
            if img.format != 'PNG':
                raise InvalidImageData("imageData is not a PNG image")
            img.load()
            page = _to_rgb(img).resize(page_px, Image.Resampling.LANCZOS)
    except (OSError, SyntaxError, Image.DecompressionBombError) as e:
        raise InvalidImageData(f"imageData could not be decoded: {e}")

    buffer = io.BytesIO()
    page.save(buffer, 'PDF', resolution=PDF_DPI)
    return buffer.getvalue()


def generate_qr_code_png(data: str) -> bytes:
    """QR code for data as PNG bytes"""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=4,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    img_buffer = io.BytesIO()
    img.save(img_buffer, format='PNG')
    return img_buffer.getvalue()
