from io import BytesIO

import qrcode
from qrcode.constants import ERROR_CORRECT_M

from gatepass.app.services.credential_encoder import CredentialEncoder


class QrCodeEncoder(CredentialEncoder):
    """QR code encoder producing black-on-white PNG images"""

    def __init__(self, box_size: int = 10, border: int = 2):
        self.box_size = box_size
        self.border = border

    def encode(self, payload: str) -> bytes:
        qr = qrcode.QRCode(
            error_correction=ERROR_CORRECT_M,
            box_size=self.box_size,
            border=self.border,
        )
        qr.add_data(payload)
        qr.make(fit=True)
        image = qr.make_image(fill_color="black", back_color="white")

        buffer = BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()
