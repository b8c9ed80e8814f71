from dataclasses import dataclass, replace
from typing import Any

from dynamodb_data.adapters.decoder import Decoder

from libb import ConfigOptions, load_options

__all__ = [
    'BridgeOptions',
    'resolve_options',
]


@dataclass
class BridgeOptions(ConfigOptions):
    """Options

    Conversion options. None of them changes the empty-string sentinel.

    - nan_as_null: Write float NaN (Python, NumPy) as NULL instead of failing
      with NumberOutOfRange (default: False)
    - binary_as_text: Read binary attributes as UTF-8 text (default: False)
    - use_decimal: Read fractional numbers as Decimal instead of float
      (default: False)
    """
    nan_as_null: bool = False
    binary_as_text: bool = False
    use_decimal: bool = False

    def __post_init__(self):
        for name in ('nan_as_null', 'binary_as_text', 'use_decimal'):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f'{name} must be a bool')

    def decoder(self) -> Decoder:
        """Build a decoder configured with these options.
        """
        return Decoder(binary_as_text=self.binary_as_text, use_decimal=self.use_decimal)


def resolve_options(options: BridgeOptions | dict[str, Any] | str | None = None,
                    config: Any | None = None, **kw: Any) -> BridgeOptions:
    """Build BridgeOptions from any of the accepted forms.

    Args:
        options: Can be:
                - BridgeOptions object
                - String name of a setting in ``config``
                - Dictionary of options
                - None, options specified as keyword arguments
        config: Configuration object (for loading from config files)
        **kw: Additional keyword arguments to override options

    Returns
        BridgeOptions instance
    """
    if isinstance(options, BridgeOptions):
        return replace(options, **kw) if kw else options
    if options is None:
        return BridgeOptions(**kw)
    options_func = load_options(cls=BridgeOptions)(lambda o, c: o)
    return options_func(options, config, **kw)
