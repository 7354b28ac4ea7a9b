def _title_word(word):
    """Capitalize each hyphen-joined part: "saint-denis" -> "Saint-Denis"."""
    return "-".join(part[:1].upper() + part[1:] for part in word.lower().split("-"))


def normalize_place(text):
    """
    Normalize one half of a location token for display.
    Underscores become spaces, runs of whitespace collapse, and every word is
    lower-cased with its first letter capitalized.
    """
    words = text.replace("_", " ").split()
    return " ".join(_title_word(w) for w in words)


def parse_location(token):
    """
    Split a "city-country" location token into (city, country).
    The split happens on the last hyphen, so hyphens inside the city survive:
        "paris-france"       -> ("Paris", "France")
        "new_york-usa"       -> ("New York", "Usa")
        "saint-denis-france" -> ("Saint-Denis", "France")
        "unknown"            -> ("Unknown", "")
    """
    if not token:
        return "", ""

    city, sep, country = token.rpartition("-")
    if not sep:
        return normalize_place(token), ""
    return normalize_place(city), normalize_place(country)
