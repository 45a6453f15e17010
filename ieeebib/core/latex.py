"""Decoding of LaTeX escape markup into display characters.

Only a small, fixed set of accents and ligatures is understood. Anything
else is left as literal text, with the exception of grouping braces which
are always removed at the end.
"""

import re
from collections.abc import Callable

UMLAUTS = {"a": "ä", "o": "ö", "u": "ü", "A": "Ä", "O": "Ö", "U": "Ü"}

CEDILLAS = {"c": "ç", "C": "Ç", "s": "ş", "S": "Ş"}

TILDES = {"n": "ñ", "N": "Ñ"}

# Grave and acute only; other accent/vowel pairs lose their diacritic
ACCENTS = {
    "`a": "à",
    "'a": "á",
    "`e": "è",
    "'e": "é",
    "`i": "ì",
    "'i": "í",
    "`o": "ò",
    "'o": "ó",
    "`u": "ù",
    "'u": "ú",
    "`A": "À",
    "'A": "Á",
    "`E": "È",
    "'E": "É",
    "`I": "Ì",
    "'I": "Í",
    "`O": "Ò",
    "'O": "Ó",
    "`U": "Ù",
    "'U": "Ú",
}

LIGATURES = {"ae": "æ", "AE": "Æ", "oe": "œ", "OE": "Œ"}

Replacement = str | Callable[[re.Match[str]], str]


class LatexDecoder:
    """Apply the escape substitution table to a string.

    The order of ``SUBSTITUTIONS`` matters: the accent rules match
    brace-wrapped letters, so brace stripping has to come last.
    """

    SUBSTITUTIONS: list[tuple[re.Pattern[str], Replacement]] = [
        (
            re.compile(r'\\"\{?([aouAOU])\}?'),
            lambda m: UMLAUTS[m.group(1)],
        ),
        (re.compile(r'\\"\{?s\}?'), "ß"),
        (re.compile(r"\\ss(?:\{\})?(?![A-Za-z])"), "ß"),
        (
            re.compile(r"\\c\{([cCsS])\}"),
            lambda m: CEDILLAS[m.group(1)],
        ),
        (
            re.compile(r"\\~\{?([nN])\}?"),
            lambda m: TILDES[m.group(1)],
        ),
        (
            re.compile(r"\\([`'])\{?([aeiouAEIOU])\}?"),
            lambda m: ACCENTS.get(m.group(1) + m.group(2), m.group(2)),
        ),
        (
            re.compile(r"\\(ae|AE|oe|OE)"),
            lambda m: LIGATURES[m.group(1)],
        ),
        (re.compile(r"~"), " "),
        (re.compile(r"---"), "\u2014"),
        (re.compile(r"--"), "\u2013"),
        (re.compile(r"[{}]"), ""),
    ]

    def decode(self, text: str) -> str:
        """Decode escape markup.

        Args:
            text: Raw field text.

        Returns:
            Text with escapes replaced by display characters and braces
            removed. Empty input is returned unchanged.
        """
        if not text:
            return text

        result = text
        for pattern, replacement in self.SUBSTITUTIONS:
            result = pattern.sub(replacement, result)
        return result


_decoder = LatexDecoder()


def decode(text: str) -> str:
    """Decode escape markup with the default decoder."""
    return _decoder.decode(text)
