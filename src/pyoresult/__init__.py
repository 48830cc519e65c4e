from . import option, result
from ._core import Config, Pipeable, get_config, set_config
from ._results import NONE, Err, NoneOption, Ok, Option, OptionUnwrapError, Result, Some
from ._types import ValueIter

__all__ = [
    "NONE",
    "Config",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Pipeable",
    "Result",
    "Some",
    "ValueIter",
    "get_config",
    "option",
    "result",
    "set_config",
]
