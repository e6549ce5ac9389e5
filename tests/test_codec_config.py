import pytest
from pydantic import ValidationError

from bookkeeping_client.models.codec_config import CodecConfig


def test_codec_config_defaults():
    cfg = CodecConfig()

    assert cfg.indent is None
    assert cfg.sort_keys is False
    assert cfg.ensure_ascii is False
    assert cfg.forbid_unknown_keys is False


def test_codec_config_rejects_negative_indent():
    with pytest.raises(ValidationError) as exc:
        CodecConfig(indent=-1)

    assert "indent" in str(exc.value)


def test_codec_config_from_dict():
    cfg = CodecConfig.model_validate({"indent": 2, "sort_keys": True, "forbid_unknown_keys": True})

    assert cfg.indent == 2
    assert cfg.sort_keys is True
    assert cfg.forbid_unknown_keys is True
