from __future__ import annotations

from string_utilities.options.exceptions import OptionError
from string_utilities.options.exceptions import OptionGrammarError
from string_utilities.options.exceptions import OptionScanError
from string_utilities.options.option import Option
from string_utilities.options.scanner import OptionScanner
from string_utilities.options.user import OptionUser


__all__ = [
    "Option",
    "OptionError",
    "OptionGrammarError",
    "OptionScanError",
    "OptionScanner",
    "OptionUser",
]
