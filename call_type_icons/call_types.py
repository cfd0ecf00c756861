"""Call-type codes and their mapping to icon categories."""

from __future__ import annotations

import enum
import logging

log = logging.getLogger(__name__)


class CallType(enum.IntEnum):
    INCOMING = 1
    OUTGOING = 2
    MISSED = 3
    VOICEMAIL = 4
    # Carrier IMS tags, not part of the platform call log enumeration
    INCOMING_IMS = 5
    OUTGOING_IMS = 6
    MISSED_IMS = 7


class IconCategory(enum.Enum):
    INCOMING = "incoming"
    OUTGOING = "outgoing"
    MISSED = "missed"
    VOICEMAIL = "voicemail"
    VIDEO = "video"
    IMS = "ims"
    WIFI = "wifi"


_BASE = {
    CallType.INCOMING: IconCategory.INCOMING,
    CallType.INCOMING_IMS: IconCategory.INCOMING,
    CallType.OUTGOING: IconCategory.OUTGOING,
    CallType.OUTGOING_IMS: IconCategory.OUTGOING,
    CallType.MISSED: IconCategory.MISSED,
    CallType.MISSED_IMS: IconCategory.MISSED,
    CallType.VOICEMAIL: IconCategory.VOICEMAIL,
}

_IMS = frozenset({CallType.INCOMING_IMS, CallType.OUTGOING_IMS, CallType.MISSED_IMS})


def classify(call_type: int) -> IconCategory:
    """Return the direction icon for a call type.

    Third-party call log providers may write codes we don't know about
    (e.g. to tell rejected calls apart from missed ones). Those are shown
    as missed calls rather than failing.
    """
    category = _BASE.get(call_type)
    if category is None:
        log.debug("Unknown call type %s, showing as missed", call_type)
        return IconCategory.MISSED
    return category


def classify_ims(call_type: int) -> IconCategory | None:
    """Return IconCategory.IMS for the IMS variants, None for anything else."""
    if call_type in _IMS:
        return IconCategory.IMS
    return None
