import re

from tracker import config
from tracker.api import FetchError, fetch_json
from tracker.models import DetailPage, IndexPage
from tracker.pipeline.search import search_page
from tracker.pipeline.sort import get_sorter
from tracker.pipeline.validate import decode_artist

# Optional sign and ASCII digits, nothing else
ARTIST_ID_RE = re.compile(r"[+-]?[0-9]+")


def collect_cities(artists):
    """Sorted distinct non-empty locations from every artist's locations and relation keys."""
    cities = set()
    for artist in artists:
        cities.update(loc for loc in artist.locations if loc)
        cities.update(loc for loc in artist.relation if loc)
    return sorted(cities)


def build_index_page(catalog, sort_by=None, query=None):
    """
    Build the artist listing page.
    - A non-empty query replaces the page with the matching artists only
      (the city list is dropped along with it)
    - A known sort_by attaches flattened, sorted concerts for the artists
      left on the page; otherwise concerts stay None
    """
    page = IndexPage(artists=list(catalog.artists), cities=collect_cities(catalog.artists))

    if query:
        page = search_page(query, page)

    sorter = get_sorter(sort_by)
    if sorter:
        page.concerts = sorter(page.artists)

    return page


def parse_artist_id(raw):
    """Parse an artist id from a query value, defaulting to the first artist."""
    if not isinstance(raw, str) or not ARTIST_ID_RE.fullmatch(raw):
        return config.DEFAULT_ARTIST_ID
    artist_id = int(raw)
    if artist_id < 1:
        return config.DEFAULT_ARTIST_ID
    return artist_id


def build_detail_page(catalog, artist_id, fetch=fetch_json):
    """
    Build the artist detail page.
    Catalog hits carry locations, dates and the relation. On a miss the artist
    alone is fetched, so those stay empty; if that fetch fails too, a
    zero-valued page is returned instead of an error.
    """
    artist = catalog.find(artist_id)
    if artist is not None:
        return DetailPage(
            artist_name=artist.name,
            artist_image=artist.image,
            members=list(artist.members),
            creation_date=artist.creation_date,
            first_album=artist.first_album,
            genres=list(artist.genres),
            locations=list(artist.locations),
            dates=list(artist.dates),
            relation={loc: list(dates) for loc, dates in artist.relation.items()},
        )

    url = f"{config.ARTISTS_URL}/{artist_id}"
    try:
        raw = decode_artist(fetch(url), url)
    except FetchError:
        return DetailPage()

    return DetailPage(
        artist_name=raw.name,
        artist_image=raw.image,
        members=list(raw.members),
        creation_date=raw.creation_date,
        first_album=raw.first_album,
        genres=list(raw.genres),
    )
