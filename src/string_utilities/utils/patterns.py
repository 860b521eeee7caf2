from __future__ import annotations

import re


def apply_regex(regex: str | re.Pattern[str], target: str) -> list[list[str]]:
    """
    Return every match of regex in target.

    Each match is listed as the whole matched text followed by its captured
    groups, with groups that did not participate reported as empty strings.
    """
    pattern = re.compile(regex) if isinstance(regex, str) else regex

    return [
        [match.group(0), *match.groups(default="")]
        for match in pattern.finditer(target)
    ]
