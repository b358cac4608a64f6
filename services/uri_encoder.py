import urllib.parse

from services.totp_builder import TotpDescriptor


def encode(descriptor: TotpDescriptor) -> str:
    issuer = urllib.parse.quote(descriptor.issuer, safe="")
    account = urllib.parse.quote(descriptor.account_name, safe="")
    return (
        f"otpauth://totp/{issuer}:{account}"
        f"?secret={descriptor.secret}&issuer={issuer}"
        f"&algorithm={descriptor.algorithm.value}"
        f"&digits={descriptor.digits}&period={descriptor.period}"
    )
