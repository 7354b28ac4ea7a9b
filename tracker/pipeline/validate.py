from types import MappingProxyType

from tracker.api import DecodeError
from tracker.models import RawArtist


def _require_id(entry, url):
    artist_id = entry.get("id")
    # bool is an int subclass; a JSON true/false is not an identifier
    if not isinstance(artist_id, int) or isinstance(artist_id, bool):
        raise DecodeError(url, f"entry has invalid id {artist_id!r}")
    return artist_id


def _string(value, url, field_name):
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(url, f"{field_name} must be a string")
    return value


def _string_list(value, url, field_name):
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DecodeError(url, f"{field_name} must be a list of strings")
    return tuple(value)


def _index_entries(payload, url):
    if not isinstance(payload, dict) or not isinstance(payload.get("index"), list):
        raise DecodeError(url, "expected an object with an 'index' list")
    for entry in payload["index"]:
        if not isinstance(entry, dict):
            raise DecodeError(url, "index entries must be objects")
        yield entry


def decode_artist(entry, url):
    """Turn one artists-feed object into a RawArtist. Missing fields stay zero-valued."""
    if not isinstance(entry, dict):
        raise DecodeError(url, "artist entries must be objects")

    creation_date = entry.get("creationDate") or 0
    if not isinstance(creation_date, int) or isinstance(creation_date, bool):
        raise DecodeError(url, f"creationDate must be an integer, got {creation_date!r}")

    return RawArtist(
        id=_require_id(entry, url),
        name=_string(entry.get("name"), url, "name"),
        image=_string(entry.get("image"), url, "image"),
        members=_string_list(entry.get("members"), url, "members"),
        creation_date=creation_date,
        first_album=_string(entry.get("firstAlbum"), url, "firstAlbum"),
        genres=_string_list(entry.get("genres"), url, "genres"),
    )


def decode_artists(payload, url):
    if not isinstance(payload, list):
        raise DecodeError(url, "expected a list of artists")
    return [decode_artist(entry, url) for entry in payload]


def decode_dates_index(payload, url):
    """Return {artist id: dates tuple} from the dates feed."""
    return {
        _require_id(entry, url): _string_list(entry.get("dates"), url, "dates")
        for entry in _index_entries(payload, url)
    }


def decode_locations_index(payload, url):
    """Return {artist id: locations tuple} from the locations feed."""
    return {
        _require_id(entry, url): _string_list(entry.get("locations"), url, "locations")
        for entry in _index_entries(payload, url)
    }


def decode_relation_index(payload, url):
    """Return {artist id: read-only {location: dates tuple}} from the relation feed."""
    relations = {}
    for entry in _index_entries(payload, url):
        artist_id = _require_id(entry, url)
        dates_locations = entry.get("datesLocations") or {}
        if not isinstance(dates_locations, dict):
            raise DecodeError(url, "datesLocations must be an object")
        relations[artist_id] = MappingProxyType({
            location: _string_list(dates, url, f"datesLocations[{location!r}]")
            for location, dates in dates_locations.items()
        })
    return relations
