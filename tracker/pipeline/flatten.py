from tracker.models import ConcertView


def first_genre(genres):
    return genres[0] if genres else ""


def build_concerts(artists):
    """
    Flatten each artist's location -> dates relation into ConcertView entries.
    Locations come out in the feed's key order; only the sorts in
    tracker.pipeline.sort give the result a defined order.
    """
    concerts = []
    for artist in artists:
        genre = first_genre(artist.genres)
        for location, dates in artist.relation.items():
            for date in dates:
                concerts.append(ConcertView(
                    artist_id=artist.id,
                    artist_name=artist.name,
                    artist_image=artist.image,
                    location=location,
                    date=date,
                    genre=genre,
                ))
    return concerts
