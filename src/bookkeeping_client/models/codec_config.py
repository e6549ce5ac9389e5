from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, NonNegativeInt


class CodecConfig(BaseModel):
    """Options for encoding and decoding User payloads."""

    model_config = ConfigDict(frozen=True)

    # None keeps the encoded JSON on a single line.
    indent: Optional[NonNegativeInt] = None
    sort_keys: bool = False
    ensure_ascii: bool = False

    forbid_unknown_keys: bool = False
