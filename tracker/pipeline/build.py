import time

from tracker import config
from tracker.api import FetchError, fetch_json
from tracker.models import EMPTY_RELATION, ArtistView, Catalog
from tracker.pipeline.metrics import FeedMetrics
from tracker.pipeline.validate import (
    decode_artists,
    decode_dates_index,
    decode_locations_index,
    decode_relation_index,
)


class BuildError(Exception):
    """One of the feeds failed, so no artist views were built."""

    def __init__(self, feed, cause):
        super().__init__(f"failed to load {feed} feed: {cause}")
        self.feed = feed
        self.cause = cause


def _load_feed(name, url, decode, fetch, metrics):
    """Fetch and decode a single feed, recording metrics when a dict is supplied."""
    feed_metrics = FeedMetrics(name=name)
    if metrics is not None:
        metrics[name] = feed_metrics
    start_time = time.time()

    try:
        records = decode(fetch(url), url)
    except FetchError as e:
        feed_metrics.errors = 1
        feed_metrics.error_messages.append(str(e))
        raise BuildError(name, e) from e
    finally:
        feed_metrics.duration_ms = (time.time() - start_time) * 1000

    feed_metrics.record_count = len(records)
    return records


def build_artist_views(fetch=fetch_json, metrics=None):
    """
    Fetch the four feeds and left-join them on artist id.
    - Any failing feed aborts the whole build with a BuildError
    - Artists without dates/locations/relation get empty collections
    - Views are ordered by name, compared by code point (not locale)
    Returns a tuple of ArtistView.
    """
    artists = _load_feed("artists", config.ARTISTS_URL, decode_artists, fetch, metrics)
    dates_by_id = _load_feed("dates", config.DATES_URL, decode_dates_index, fetch, metrics)
    locations_by_id = _load_feed("locations", config.LOCATIONS_URL, decode_locations_index, fetch, metrics)
    relation_by_id = _load_feed("relation", config.RELATION_URL, decode_relation_index, fetch, metrics)

    artists = sorted(artists, key=lambda a: a.name)

    return tuple(
        ArtistView(
            id=a.id,
            name=a.name,
            image=a.image,
            members=a.members,
            creation_date=a.creation_date,
            first_album=a.first_album,
            genres=a.genres,
            locations=locations_by_id.get(a.id, ()),
            dates=dates_by_id.get(a.id, ()),
            relation=relation_by_id.get(a.id, EMPTY_RELATION),
        )
        for a in artists
    )


def load_catalog(fetch=fetch_json, log_func=None, metrics=None):
    """
    Build the catalog once at startup.
    A failed build is logged as a warning and yields an empty catalog;
    callers keep running with no artists rather than stopping.
    log_func: optional logging function (defaults to print)
    """
    log = log_func or print

    try:
        artists = build_artist_views(fetch=fetch, metrics=metrics)
    except BuildError as e:
        log(f"Warning: failed to load artists view: {e}")
        return Catalog()

    return Catalog(artists=artists)
