import base64
import logging
from dataclasses import dataclass
from enum import Enum

import pyotp

from constants import AppConstants
from models import TotpEntry
from services.errors import (
    InvalidDigits,
    InvalidPeriod,
    InvalidSecretEncoding,
    SecretTooShort,
    UnsupportedAlgorithm,
)
from utils import is_valid_base32, normalize_base32

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"


ALG_MAP = {alg.value: alg for alg in Algorithm}


@dataclass(frozen=True)
class TotpDescriptor:
    algorithm: Algorithm
    digits: int
    period: int
    secret_bytes: bytes
    issuer: str
    account_name: str

    @property
    def secret(self) -> str:
        """Canonical unpadded Base32 form of secret_bytes"""
        return base64.b32encode(self.secret_bytes).decode().rstrip("=")


class TotpBuilder:
    """
    Turns an exported entry into a TotpDescriptor.

    allow_short_secrets keeps secrets exactly as exported even when they are
    below the usual 80 bit minimum. Set it to False to enforce
    AppConstants.MIN_SECRET_LENGTH.
    """

    def __init__(self, allow_short_secrets: bool = True):
        self.allow_short_secrets = allow_short_secrets

    def build(self, entry: TotpEntry) -> TotpDescriptor:
        algorithm = ALG_MAP.get(entry.algorithm.upper())
        if algorithm is None:
            raise UnsupportedAlgorithm(entry.algorithm)

        if not AppConstants.MIN_DIGITS <= entry.digits <= AppConstants.MAX_DIGITS:
            raise InvalidDigits(entry.digits)

        if entry.period_time == 0:
            raise InvalidPeriod(entry.period_time)

        secret = normalize_base32(entry.secret)
        try:
            secret_bytes = pyotp.TOTP(secret).byte_secret()
        except ValueError as e:
            raise InvalidSecretEncoding(entry.secret) from e

        if not self.allow_short_secrets and not is_valid_base32(secret, AppConstants.MIN_SECRET_LENGTH):
            raise SecretTooShort(len(secret.rstrip("=")), AppConstants.MIN_SECRET_LENGTH)

        logger.debug("Secret length: %d bytes (%d bits)", len(secret_bytes), len(secret_bytes) * 8)

        return TotpDescriptor(
            algorithm=algorithm,
            digits=entry.digits,
            period=entry.period_time,
            secret_bytes=secret_bytes,
            issuer=entry.label_name,
            account_name=entry.username,
        )
