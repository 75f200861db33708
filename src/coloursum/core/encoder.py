"""Digest re-encoding.

Checksum tools print hex. Denser alphabets shorten the digest so fewer
segments need comparing; ecoji goes furthest, one emoji per 10 bits.
Encoding failures are expected (the classifier only guarantees a non-empty
token for BSD lines), so they come back as a value rather than an
exception.
"""

from __future__ import annotations

import base64
import io
from dataclasses import dataclass

import ecoji

from coloursum.constants import HEX_DIGITS
from coloursum.core.options import DigestEncoding
from coloursum.exceptions import DecodeError
from coloursum.logger import get_logger

logger = get_logger(__name__)

_ENCODERS = {
    DigestEncoding.BASE32: base64.b32encode,
    DigestEncoding.BASE64: base64.b64encode,
    DigestEncoding.BASE85: base64.b85encode,
}


def _ecoji_encode(raw: bytes) -> str:
    out = io.StringIO()
    ecoji.encode(io.BytesIO(raw), out)
    return out.getvalue()


@dataclass(frozen=True, slots=True)
class EncodedDigest:
    """Outcome of encoding a digest.

    Attributes:
        text: Encoded digest, or the original digest if encoding failed.
        error: The decode failure, None on success.

    """

    text: str
    error: DecodeError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def decode_hex(digest: str) -> bytes:
    """Decode a hexadecimal digest to bytes.

    Unlike bytes.fromhex this rejects embedded whitespace.

    Args:
        digest: Hex string, either case.

    Returns:
        The decoded bytes.

    Raises:
        DecodeError: If the digest is empty, of odd length or not hex.

    """
    if not digest:
        raise DecodeError("digest is empty")
    if len(digest) % 2:
        raise DecodeError("odd number of hex digits", target=digest)
    if any(char not in HEX_DIGITS for char in digest):
        raise DecodeError("non-hexadecimal character", target=digest)
    return bytes.fromhex(digest)


def encode_digest(digest: str, encoding: DigestEncoding) -> EncodedDigest:
    """Re-encode a hex digest.

    Args:
        digest: Digest text as extracted from the line.
        encoding: Target representation.

    Returns:
        EncodedDigest with the new text, or with the original text and
        the DecodeError when the digest is not valid hex.

    Examples:
        >>> encode_digest("d41d8cd98f00b204e9800998ecf8427e", DigestEncoding.BASE64).text
        '1B2M2Y8AsgTpgAmY7PhCfg=='
        >>> encode_digest("xyz", DigestEncoding.BASE64).failed
        True

    """
    if encoding is DigestEncoding.HEX:
        return EncodedDigest(digest)

    try:
        raw = decode_hex(digest)
    except DecodeError as exc:
        logger.debug("Keeping digest as-is, %s: %s", encoding.value, exc)
        return EncodedDigest(digest, exc)

    if encoding is DigestEncoding.ECOJI:
        return EncodedDigest(_ecoji_encode(raw))
    return EncodedDigest(_ENCODERS[encoding](raw).decode("ascii"))
