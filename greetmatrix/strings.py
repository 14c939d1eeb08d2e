"""Localized greeting strings, looked up by key.

Values are limited to what the 3x5 font can draw: A-Z, digits and a little
punctuation. A newline splits the greeting onto several lines.
"""

DEFAULT_LOCALE = "en"

STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "happy_birthday": "HAPPY\nBIRTHDAY!",
        "from_": "FROM: ALL OF US",
    },
    "es": {
        "happy_birthday": "FELIZ\nCUMPLE!",
        "from_": "DE: TODOS",
    },
    "fr": {
        "happy_birthday": "JOYEUX\nANNIV!",
        "from_": "DE: NOUS TOUS",
    },
    "de": {
        "happy_birthday": "ALLES\nGUTE!",
        "from_": "VON: UNS ALLEN",
    },
}


def get_string(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Look up `key` for `locale`, falling back to the default locale.

    Locales like "fr_CA" or "es-MX" resolve to their language. An unknown key
    raises KeyError.
    """
    lang = locale.replace("-", "_").split("_")[0].lower() if locale else DEFAULT_LOCALE
    table = STRINGS.get(lang, STRINGS[DEFAULT_LOCALE])
    if key in table:
        return table[key]
    return STRINGS[DEFAULT_LOCALE][key]
