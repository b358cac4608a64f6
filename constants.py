# Application constants
import qrcode.constants


class AppConstants:
    # TOTP validation
    MIN_DIGITS = 6
    MAX_DIGITS = 8
    # 16 Base32 characters == 80 bits
    MIN_SECRET_LENGTH = 16

    # QR rendering
    QR_ERROR_CORRECTION = qrcode.constants.ERROR_CORRECT_M
    QR_BOX_SIZE = 10
    QR_BORDER = 4
