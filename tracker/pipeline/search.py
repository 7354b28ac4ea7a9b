from tracker.models import IndexPage


def match_artists(query, artists):
    """Artists whose name equals query, ignoring case. No substring matching."""
    wanted = query.lower()
    return [a for a in artists if a.name.lower() == wanted]


def search_page(query, page):
    """
    Replace the page with the artists matching query.
    The result is a fresh page: any concerts or cities already on the
    incoming page are dropped, not filtered.
    """
    return IndexPage(artists=match_artists(query, page.artists))
