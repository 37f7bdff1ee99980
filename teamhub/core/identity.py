import secrets
import time
from typing import Tuple

from teamhub.core.exceptions import ValidationError

DIRECT_PREFIX = "dm"
SEPARATOR = "_"


def canonical_pair(user_a: str, user_b: str) -> Tuple[str, str]:
    """Return the two identities in lexicographic order."""
    if not user_a or not user_b:
        raise ValidationError("Both participant ids are required")
    lo, hi = sorted([user_a, user_b])
    return lo, hi


def derive_direct_id(user_a: str, user_b: str) -> str:
    """
    Conversation id for a two-party chat.

    Order independent: derive_direct_id(a, b) == derive_direct_id(b, a).
    Ids that themselves contain the separator can alias each other
    (``"a_b" + "c"`` vs ``"a" + "b_c"``); callers use generated user ids.
    """
    lo, hi = canonical_pair(user_a, user_b)
    return SEPARATOR.join([DIRECT_PREFIX, lo, hi])


def generate_id(prefix: str) -> str:
    """Time-ordered id with a random suffix, e.g. ``group_1718000000000_9f2c4a1b``."""
    millis = int(time.time() * 1000)
    return f"{prefix}{SEPARATOR}{millis}{SEPARATOR}{secrets.token_hex(4)}"
