from tracker.pipeline.flatten import build_concerts
from tracker.utils.dates import parse_date


def normalize_key(text):
    """Trim and lower-case a city or genre for stable comparisons."""
    return text.strip().lower()


def date_key(date):
    """
    Sort key for a raw date string.
    Parseable dates come first, ordered by instant; the rest follow,
    ordered by their raw text.
    """
    parsed = parse_date(date)
    if parsed.ok:
        return (0, parsed.value)
    return (1, date)


def name_key(concert):
    return concert.artist_name.lower()


def sort_concerts_by_city(artists):
    """Flattened concerts sorted by city, then date, then artist name."""
    concerts = build_concerts(artists)
    concerts.sort(key=lambda c: (normalize_key(c.location), date_key(c.date), name_key(c)))
    return concerts


def sort_concerts_by_date(artists):
    """Flattened concerts sorted by date, then city, then artist name."""
    concerts = build_concerts(artists)
    concerts.sort(key=lambda c: (date_key(c.date), normalize_key(c.location), name_key(c)))
    return concerts


def sort_concerts_by_genre(artists):
    """Flattened concerts sorted by first genre, then date, then artist name."""
    concerts = build_concerts(artists)
    concerts.sort(key=lambda c: (normalize_key(c.genre), date_key(c.date), name_key(c)))
    return concerts


def sort_concerts_by_name(artists):
    """Flattened concerts sorted by artist name A-Z."""
    concerts = build_concerts(artists)
    concerts.sort(key=name_key)
    return concerts


SORTERS = {
    "ville": sort_concerts_by_city,
    "city": sort_concerts_by_city,
    "date": sort_concerts_by_date,
    "genre": sort_concerts_by_genre,
    "nom": sort_concerts_by_name,
    "name": sort_concerts_by_name,
}


def get_sorter(sort_by):
    """Return the sort function for a sort parameter, or None for no flattening."""
    if not sort_by:
        return None
    return SORTERS.get(sort_by)
