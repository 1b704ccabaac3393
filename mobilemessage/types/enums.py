from __future__ import annotations

from enum import Enum


class ResponseFormat(str, Enum):
    """What the client hands back from an API call.

    - ENHANCED: a normalized response wrapper (default)
    - RAW: the decoded JSON dict, untouched
    - BOTH: the normalized wrapper, which still allows raw key access

    Example:
        >>> from mobilemessage import Client, ResponseFormat
        >>> Client(username="u", password="p", response_format=ResponseFormat.RAW)
    """

    ENHANCED = "enhanced"
    RAW = "raw"
    BOTH = "both"


class ContractVariant(str, Enum):
    """Wire contract spoken by the deployment.

    The two API generations disagree on field names and status vocabularies.
    The variant is fixed per client; responses are never sniffed.

    - RESULTS: ``{"status": "complete", "results": [...], "total_cost": N}``
    - MESSAGES: ``{"success": true, "messages": [...]}``
    """

    RESULTS = "results"
    MESSAGES = "messages"


class MessageOutcome(str, Enum):
    """Classification of one message record in a send response.

    UNKNOWN covers status strings neither contract maps; such records count
    towards neither `sent_count` nor `failed_count`.
    """

    SENT = "sent"
    FAILED = "failed"
    UNKNOWN = "unknown"
