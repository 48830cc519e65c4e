from ._option import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._result import Err, Ok, Result

__all__ = [
    "NONE",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Result",
    "Some",
]
