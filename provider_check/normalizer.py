"""Phone number normalization to Indonesian local format (leading 0)."""

import re

_NON_DIGIT_RE = re.compile(r"\D")


def normalize(raw: str, country_code: str = "62", trunk_prefix: str = "0") -> str:
    """
    Reduce *raw* to digits (keeping one leading ``+``) and rewrite the
    country code to the local trunk prefix.

        normalize("+62 852-0098-3740")  -> "085200983740"
        normalize("6285200983740")      -> "085200983740"
        normalize("abc")                -> ""

    The result is not validated and may be empty or malformed.
    """
    if not raw:
        return ""
    s = str(raw).strip()
    plus = s.startswith("+")
    s = _NON_DIGIT_RE.sub("", s)
    if plus:
        s = "+" + s

    if s.startswith("+" + country_code):
        s = trunk_prefix + s[len(country_code) + 1:]
    elif s.startswith(country_code) and not s.startswith(trunk_prefix):
        s = trunk_prefix + s[len(country_code):]
    return s
