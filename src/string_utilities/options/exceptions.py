from __future__ import annotations


class OptionError(Exception):
    pass


class OptionGrammarError(OptionError):
    pass


class OptionScanError(OptionError):
    pass
