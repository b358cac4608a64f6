import io

import qrcode
from qrcode.exceptions import DataOverflowError

from constants import AppConstants
from services.errors import QrEncodingError


def render(uri: str) -> bytes:
    qr = qrcode.QRCode(
        version=None,
        error_correction=AppConstants.QR_ERROR_CORRECTION,
        box_size=AppConstants.QR_BOX_SIZE,
        border=AppConstants.QR_BORDER,
    )
    qr.add_data(uri)
    # qrcode 8 reports an oversized payload as ValueError from best_fit
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as e:
        raise QrEncodingError(len(uri)) from e

    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
