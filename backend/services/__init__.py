# Services module exports
from .invites import InviteStore, StorageFailure
from .images import InvalidImageData, decode_png_data_uri, render_image_pdf, generate_qr_code_png
