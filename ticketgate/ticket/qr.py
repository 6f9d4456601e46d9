# ticketgate/ticket/qr.py
import base64
import io

import qrcode


def to_data_url(data: str) -> str:
    """Encode ``data`` as a QR code and return it as a PNG data URI."""
    img = qrcode.make(data)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    png_b64 = base64.b64encode(buf.getvalue()).decode("utf-8")
    return f"data:image/png;base64,{png_b64}"
