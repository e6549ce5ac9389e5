"""bookkeeping_client.

Python client types for the ALICE Bookkeeping API.

Holds the schema-derived record types and the JSON codec that moves them on
and off the wire.
"""

from bookkeeping_client.core.codec import (
    decode_user,
    decode_users,
    encode_user,
    encode_users,
    load_users,
    user_from_dict,
    user_to_dict,
)
from bookkeeping_client.core.exceptions import (
    BookkeepingClientException,
    PayloadDecodeError,
    UserValidationError,
)
from bookkeeping_client.models.codec_config import CodecConfig
from bookkeeping_client.models.user import User

__version__ = "0.1.0"

__all__ = [
    "User",
    "CodecConfig",
    "encode_user",
    "encode_users",
    "decode_user",
    "decode_users",
    "load_users",
    "user_from_dict",
    "user_to_dict",
    "BookkeepingClientException",
    "PayloadDecodeError",
    "UserValidationError",
]
