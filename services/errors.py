class QrExportError(Exception):
    """Base class for everything that aborts an export run"""


class InputIOError(QrExportError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Cannot read file: {path}")


class SchemaParseError(QrExportError):
    def __init__(self, path, errors: list[str]):
        self.path = path
        self.errors = errors
        super().__init__(f"Invalid export document {path}: {'; '.join(errors)}")


class TotpValidationError(QrExportError):
    pass


class UnsupportedAlgorithm(TotpValidationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unsupported algorithm: {name}, only SHA1/SHA256/SHA512 are supported")


class InvalidDigits(TotpValidationError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(f"digits must be between 6 and 8, got {value}")


class InvalidPeriod(TotpValidationError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(f"period_time must be greater than 0, got {value}")


class InvalidSecretEncoding(TotpValidationError):
    def __init__(self, raw_value: str):
        self.raw_value = raw_value
        super().__init__(f"Secret is not valid Base32: {raw_value}")


class SecretTooShort(TotpValidationError):
    def __init__(self, length: int, min_length: int):
        self.length = length
        self.min_length = min_length
        super().__init__(f"Secret is too short ({length} characters, min {min_length})")


class QrEncodingError(QrExportError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"URI of {length} characters does not fit into a QR code")


class OutputIOError(QrExportError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Cannot write to: {path}")


class EntryExportError(QrExportError):
    def __init__(self, index: int, total: int, label_name: str, username: str, cause: Exception):
        self.index = index
        self.total = total
        self.label_name = label_name
        self.username = username
        super().__init__(f"Entry {index}/{total} {label_name} ({username}) failed: {cause}")
