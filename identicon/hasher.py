"""Input hashing.

The digest is the only source of randomness for an identicon: its first three
bytes choose the color and its first fifteen bytes choose the filled cells.
"""

import hashlib
import logging
from typing import Union

from pyrsistent import pvector

from identicon.types import Digest

log = logging.getLogger("identicon.hasher")

DIGEST_SIZE = 16


def hash_input(data: Union[str, bytes]) -> Digest:
    """Return the MD5 digest of ``data`` as a vector of 16 ints.

    Strings are hashed over their UTF-8 encoding; bytes are hashed as given.
    MD5 is used for its stable, well-known output, not for security.

    Example:
        >>> list(hash_input("hey ho"))
        [172, 137, 160, 109, 74, 239, 183, 169, 100, 217, 54, 149, 46, 248, 141, 45]
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    digest: Digest = pvector(hashlib.md5(raw).digest())
    log.debug("Hashed %d input bytes -> %s", len(raw), list(digest))
    return digest
