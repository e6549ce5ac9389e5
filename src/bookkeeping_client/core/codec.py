from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import TypeAdapter, ValidationError

from bookkeeping_client.core.exceptions import PayloadDecodeError, UserValidationError
from bookkeeping_client.core.logger import get_logger
from bookkeeping_client.models.codec_config import CodecConfig
from bookkeeping_client.models.user import USER_WIRE_KEYS, User

logger = get_logger(__name__)

_USER_LIST = TypeAdapter(List[User])

_DEFAULT_CONFIG = CodecConfig()


def user_to_dict(user: User) -> Dict[str, Any]:
    return user.model_dump(by_alias=True)


def _check_unknown_keys(data: Mapping[Any, Any], prefix: str = "") -> List[Dict[str, str]]:
    # YAML mappings may mix string and non-string keys
    return [
        {"loc": f"{prefix}{key}", "msg": "Unknown key"}
        for key in sorted(set(data) - USER_WIRE_KEYS, key=str)
    ]


def _wire_fields(data: Mapping[Any, Any]) -> Dict[str, Any]:
    # Python attribute names (e.g. external_id) are not wire keys
    return {key: value for key, value in data.items() if key in USER_WIRE_KEYS}


def user_from_dict(data: Any, config: Optional[CodecConfig] = None) -> User:
    config = config or _DEFAULT_CONFIG
    if not isinstance(data, Mapping):
        raise PayloadDecodeError(
            reason="expected a JSON object",
            details={"type": type(data).__name__},
        )

    if config.forbid_unknown_keys:
        unknown = _check_unknown_keys(data)
        if unknown:
            raise UserValidationError(unknown)

    try:
        return User.model_validate(_wire_fields(data))
    except ValidationError as e:
        raise UserValidationError.from_validation_error(e) from e


def users_from_list(data: Any, config: Optional[CodecConfig] = None) -> List[User]:
    config = config or _DEFAULT_CONFIG
    if not isinstance(data, list):
        raise PayloadDecodeError(
            reason="expected a JSON array",
            details={"type": type(data).__name__},
        )

    if config.forbid_unknown_keys:
        unknown: List[Dict[str, str]] = []
        for index, item in enumerate(data):
            if isinstance(item, Mapping):
                unknown.extend(_check_unknown_keys(item, prefix=f"{index}."))
        if unknown:
            raise UserValidationError(unknown)

    items = [_wire_fields(item) if isinstance(item, Mapping) else item for item in data]
    try:
        return _USER_LIST.validate_python(items)
    except ValidationError as e:
        raise UserValidationError.from_validation_error(e) from e


def _dumps(payload: Any, config: CodecConfig) -> str:
    return json.dumps(
        payload,
        indent=config.indent,
        sort_keys=config.sort_keys,
        ensure_ascii=config.ensure_ascii,
    )


def _loads(text: Union[str, bytes]) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise PayloadDecodeError(
            reason="invalid JSON",
            details={"line": e.lineno, "column": e.colno, "error": e.msg},
        ) from e
    except UnicodeDecodeError as e:
        raise PayloadDecodeError(
            reason="invalid JSON",
            details={"position": e.start, "error": f"{e.encoding}: {e.reason}"},
        ) from e


def encode_user(user: User, config: Optional[CodecConfig] = None) -> str:
    return _dumps(user_to_dict(user), config or _DEFAULT_CONFIG)


def encode_users(users: Iterable[User], config: Optional[CodecConfig] = None) -> str:
    payload = [user_to_dict(u) for u in users]
    logger.debug(f"Encoding {len(payload)} user(s)")
    return _dumps(payload, config or _DEFAULT_CONFIG)


def decode_user(text: Union[str, bytes], config: Optional[CodecConfig] = None) -> User:
    return user_from_dict(_loads(text), config)


def decode_users(text: Union[str, bytes], config: Optional[CodecConfig] = None) -> List[User]:
    users = users_from_list(_loads(text), config)
    logger.debug(f"Decoded {len(users)} user(s)")
    return users


def _read_structured(path: Path) -> Any:
    if path.suffix == ".json":
        with open(path, "rb") as f:
            return _loads(f.read())

    if path.suffix in (".yaml", ".yml"):
        try:
            import yaml
        except ImportError:
            raise ImportError(
                "PyYAML required for YAML payloads. "
                "Install with: pip install bookkeeping-client[yaml]"
            )
        with open(path, "rb") as f:
            try:
                return yaml.safe_load(f)
            except (yaml.YAMLError, UnicodeDecodeError) as e:
                raise PayloadDecodeError(reason="invalid YAML", details={"error": str(e)}) from e

    raise PayloadDecodeError(
        reason=f"Unsupported payload format: {path.suffix or '<none>'}. Use .json or .yaml",
        details={"path": str(path)},
    )


def load_users(path: Union[str, Path], config: Optional[CodecConfig] = None) -> List[User]:
    """
    Read users from a JSON or YAML file.

    The file may hold a single user object or an array of user objects; the
    result is always a list.

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the path is a directory or can't be read
        PayloadDecodeError: If the file can't be parsed or has the wrong shape
        UserValidationError: If any user is invalid
    """
    payload_file = Path(path)
    if not payload_file.exists():
        raise FileNotFoundError(f"Payload file not found: {path}")

    data = _read_structured(payload_file)
    logger.debug(f"Read payload from {payload_file}")

    if isinstance(data, list):
        return users_from_list(data, config)
    return [user_from_dict(data, config)]
