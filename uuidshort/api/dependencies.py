from functools import lru_cache
import logging

from uuidshort.core.config import settings
from uuidshort.services.shortuuid import ShortUUID

logger = logging.getLogger(__name__)


@lru_cache()
def get_short_uuid() -> ShortUUID:
    # InvalidAlphabet propagates: a bad SHORTUUID_ALPHABET is a configuration error
    codec = ShortUUID(settings.ALPHABET)
    logger.info(
        "Codec configured: radix=%d, encoded length=%d",
        codec.alphabet.radix, codec.encoded_length()
    )
    return codec
