from dataclasses import dataclass, field
from types import MappingProxyType

from tracker.utils.locations import parse_location

EMPTY_RELATION = MappingProxyType({})


@dataclass(frozen=True)
class RawArtist:
    """One entry of the artists feed, as decoded."""
    id: int
    name: str = ""
    image: str = ""
    members: tuple = ()
    creation_date: int = 0
    first_album: str = ""
    genres: tuple = ()


@dataclass(frozen=True)
class ArtistView:
    """An artist joined with its dates, locations and location -> dates relation."""
    id: int
    name: str
    image: str
    members: tuple
    creation_date: int
    first_album: str
    genres: tuple
    locations: tuple = ()
    dates: tuple = ()
    relation: MappingProxyType = field(default_factory=lambda: EMPTY_RELATION)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "members": list(self.members),
            "creation_date": self.creation_date,
            "first_album": self.first_album,
            "genres": list(self.genres),
            "locations": list(self.locations),
            "dates": list(self.dates),
            "relation": {loc: list(dates) for loc, dates in self.relation.items()},
        }


@dataclass(frozen=True)
class ConcertView:
    """A single artist appearance at one location on one date."""
    artist_id: int
    artist_name: str
    artist_image: str
    location: str
    date: str
    genre: str = ""

    @property
    def city(self):
        return parse_location(self.location)[0]

    @property
    def country(self):
        return parse_location(self.location)[1]

    def to_dict(self):
        return {
            "artist_id": self.artist_id,
            "artist_name": self.artist_name,
            "artist_image": self.artist_image,
            "genre": self.genre,
            "location": self.location,
            "city": self.city,
            "country": self.country,
            "date": self.date,
        }


@dataclass(frozen=True)
class Catalog:
    """
    The artist views loaded once at startup.
    Read-only after construction, so it can be handed to any number of
    page builders without locking.
    """
    artists: tuple = ()

    def find(self, artist_id):
        for artist in self.artists:
            if artist.id == artist_id:
                return artist
        return None

    def __len__(self):
        return len(self.artists)


@dataclass
class IndexPage:
    """Artist listing: artists, plus concerts when a sort was requested."""
    artists: list = field(default_factory=list)
    concerts: list | None = None
    cities: list | None = None

    def to_dict(self):
        return {
            "artists": [a.to_dict() for a in self.artists],
            "concerts": [c.to_dict() for c in self.concerts] if self.concerts is not None else None,
            "cities": list(self.cities) if self.cities is not None else None,
        }


@dataclass
class DetailPage:
    """Artist detail. All fields zero-valued when nothing could be loaded."""
    artist_name: str = ""
    artist_image: str = ""
    members: list = field(default_factory=list)
    creation_date: int = 0
    first_album: str = ""
    genres: list = field(default_factory=list)
    locations: list = field(default_factory=list)
    dates: list = field(default_factory=list)
    relation: dict = field(default_factory=dict)

    def to_dict(self):
        return {
            "artist_name": self.artist_name,
            "artist_image": self.artist_image,
            "members": list(self.members),
            "creation_date": self.creation_date,
            "first_album": self.first_album,
            "genres": list(self.genres),
            "locations": list(self.locations),
            "dates": list(self.dates),
            "relation": {loc: list(dates) for loc, dates in self.relation.items()},
        }
