import pytest
from dynamodb_data.adapters.decoder import Decoder
from dynamodb_data.options import BridgeOptions, resolve_options


def test_init_defaults():
    """Test default initialization"""
    options = BridgeOptions()

    assert options.nan_as_null is False
    assert options.binary_as_text is False
    assert options.use_decimal is False


def test_validation():
    """Test validation rules"""
    with pytest.raises(ValueError):
        BridgeOptions(nan_as_null='yes')

    with pytest.raises(ValueError):
        BridgeOptions(use_decimal=1)


def test_decoder():
    """Test decoder built from options"""
    decoder = BridgeOptions(binary_as_text=True, use_decimal=True).decoder()

    assert isinstance(decoder, Decoder)
    assert decoder.binary_as_text is True
    assert decoder.use_decimal is True


def test_resolve_options():
    """Test options resolution from instances and keywords"""
    options = BridgeOptions(use_decimal=True)
    assert resolve_options(options) is options

    overridden = resolve_options(options, nan_as_null=True)
    assert overridden.use_decimal is True
    assert overridden.nan_as_null is True
    assert options.nan_as_null is False

    assert resolve_options() == BridgeOptions()
    assert resolve_options(binary_as_text=True).binary_as_text is True


if __name__ == '__main__':
    __import__('pytest').main([__file__])
