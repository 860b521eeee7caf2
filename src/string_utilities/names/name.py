from __future__ import annotations

import functools

from typing import TYPE_CHECKING
from typing import Any

from string_utilities.scanning.whitespace import BLANK
from string_utilities.scanning.whitespace import is_whitespace
from string_utilities.scanning.whitespace import trim_whitespace


if TYPE_CHECKING:
    from collections.abc import Callable


SEPARATOR = ","
PART_SEPARATOR = BLANK * 2

# tried in this order when splitting a name into its parts
DISSECT_SEPARATORS = [SEPARATOR, PART_SEPARATOR, "\t", BLANK]

# allowed in a name besides letters and whitespace
EXTRA_CHARACTERS = ".-'()"

NOBLE_PREFIXES = ["de", "di", "van", "von"]


@functools.total_ordering
class Name:
    """
    A person's name, made of a family name and some given names.

    A Name is created either from a single string, family name first, or from
    the family name and given names separately. Both parts are capitalized
    and standardized on the way in. Names compare and hash by their
    lowercased form.
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        family_name: str | None = None,
        given_names: str | None = None,
    ) -> None:
        if name is not None:
            if family_name is not None or given_names is not None:
                raise ValueError(
                    "A name cannot be given together with its family or given names"
                )

            family_name, given_names = self.dissect_name(name)

        cleaned_family = self.standardize(self.capitalize(family_name or ""))
        cleaned_given = self.standardize(self.capitalize(given_names or ""))

        if not cleaned_family:
            cleaned_family, cleaned_given = cleaned_given, ""

        self._family_name = cleaned_family
        self._given_names = cleaned_given

        if cleaned_given:
            self._name = cleaned_family + PART_SEPARATOR + cleaned_given
        else:
            self._name = cleaned_family

        self._normal_form = self._name.lower()

    @property
    def name(self) -> str:
        return self._name

    @property
    def family_name(self) -> str:
        return self._family_name

    @property
    def given_names(self) -> str:
        return self._given_names

    @property
    def normal_form(self) -> str:
        return self._normal_form

    @staticmethod
    def check(name: str) -> bool:
        """
        Return whether name only holds letters, whitespace and the few
        punctuation characters found in names.
        """
        return all(
            char.isalpha() or is_whitespace(char) or char in EXTRA_CHARACTERS
            for char in name
        )

    @staticmethod
    def dissect_name(name: str) -> tuple[str, str]:
        """
        Split name into its family name and given names.

        The first separator found, trying a comma, two blanks, a tab and a
        blank in that order, ends the family name. Without any separator the
        whole name is the family name.
        """
        trimmed = trim_whitespace(name)

        for separator in DISSECT_SEPARATORS:
            index = trimmed.find(separator)
            if index != -1:
                family_name = trimmed[:index]
                given_names = trim_whitespace(trimmed[index + len(separator) :])

                return family_name, given_names

        return name, ""

    @staticmethod
    def standardize(name: str) -> str:
        """
        Turn whitespace and commas into blanks, drop leading and trailing
        blanks and collapse runs of blanks.
        """
        blanked = "".join(
            BLANK if is_whitespace(char) or char == SEPARATOR else char
            for char in name
        )

        return BLANK.join(word for word in blanked.split(BLANK) if word)

    @staticmethod
    def capitalize(name: str) -> str:
        """
        Capitalize every word of name.

        If name mixes lowercase and uppercase letters the original is trusted
        a little: noble prefixes such as "de" or "von" are left in lowercase
        unless they end the name, and an uppercase letter following "Mac" or
        "Fitz" is kept.
        """
        has_lower = any(char.islower() for char in name)
        has_upper = any(char.isupper() for char in name)
        has_both_cases = has_lower and has_upper

        words = [word for word in Name.standardize(name).split(BLANK) if word]

        fixed = []
        for i, word in enumerate(words):
            lowered = word.lower()

            capitalize_first = not (
                has_both_cases and word in NOBLE_PREFIXES and i < len(words) - 1
            )

            internal_index = -1
            if len(word) > 2 and lowered.startswith(("mc", "o'")):
                internal_index = 2

            if has_both_cases:
                maybe_index = -1
                if lowered.startswith("mac"):
                    maybe_index = 3
                elif lowered.startswith("fitz"):
                    maybe_index = 4

                if 0 < maybe_index < len(word) and word[maybe_index].isupper():
                    internal_index = maybe_index

            word = lowered
            if capitalize_first:
                word = word[0].upper() + word[1:]

            hyphen = word.find("-")
            if hyphen != -1 and hyphen < len(word) - 1:
                word = _upper_at(word, hyphen + 1)

            if 0 < internal_index < len(word):
                word = _upper_at(word, internal_index)

            fixed.append(word)

        return BLANK.join(fixed)

    @staticmethod
    def family_to_front(name: str) -> str:
        """
        Move the last word of name to the front, separated from the rest by
        the whitespace that preceded it.
        """
        result = trim_whitespace(name)

        last_blank = _last_index(result, is_whitespace)
        if last_blank is None:
            return result

        family_name = result[last_blank + 1 :]
        rest = result[: last_blank + 1]

        last_non_blank = _last_index(rest, lambda char: not is_whitespace(char))
        if last_non_blank is None:
            return rest + family_name

        separator = rest[last_non_blank + 1 :]

        return family_name + separator + rest[: last_non_blank + 1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented

        return self._normal_form == other._normal_form

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Name):
            return NotImplemented

        return self._normal_form < other._normal_form

    def __hash__(self) -> int:
        return hash(self._normal_form)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Name({self._name!r})"


def _upper_at(word: str, index: int) -> str:
    return word[:index] + word[index].upper() + word[index + 1 :]


def _last_index(text: str, predicate: Callable[[str], bool]) -> int | None:
    for index in range(len(text) - 1, -1, -1):
        if predicate(text[index]):
            return index

    return None
