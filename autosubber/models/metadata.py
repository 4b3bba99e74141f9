"""OMDb metadata record."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

# OMDb "Type" value for films
MOVIE_TYPE = "movie"


@dataclass(frozen=True)
class Rating:
    """One third-party score attached to a title (IMDb, Rotten Tomatoes...)."""

    source: str = ''
    value: str = ''


# OMDb JSON key -> MetadataRecord attribute
_FIELD_MAP: Dict[str, str] = {
    "Title": "title",
    "Year": "year",
    "Rated": "rated",
    "Released": "released",
    "Runtime": "runtime",
    "Genre": "genre",
    "Director": "director",
    "Writer": "writer",
    "Actors": "actors",
    "Plot": "plot",
    "Language": "language",
    "Country": "country",
    "Awards": "awards",
    "Poster": "poster",
    "Metascore": "metascore",
    "imdbRating": "imdb_rating",
    "imdbVotes": "imdb_votes",
    "imdbID": "imdb_id",
    "Type": "type",
    "DVD": "dvd",
    "BoxOffice": "box_office",
    "Production": "production",
    "Website": "website",
    "Response": "response",
    "Error": "error",
}


@dataclass(frozen=True)
class MetadataRecord:
    """
    Decoded OMDb response for a single title.

    Only title, year, rated, type and imdb_id drive the organization of a
    download; the other fields are carried through for display and logging.
    """

    title: str = ''
    year: str = ''
    rated: str = ''
    released: str = ''
    runtime: str = ''
    genre: str = ''
    director: str = ''
    writer: str = ''
    actors: str = ''
    plot: str = ''
    language: str = ''
    country: str = ''
    awards: str = ''
    poster: str = ''
    ratings: Tuple[Rating, ...] = field(default_factory=tuple)
    metascore: str = ''
    imdb_rating: str = ''
    imdb_votes: str = ''
    imdb_id: str = ''
    type: str = ''
    dvd: str = ''
    box_office: str = ''
    production: str = ''
    website: str = ''
    response: str = ''
    error: str = ''

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "MetadataRecord":
        """
        Build a record from an OMDb JSON object.

        Args:
            payload: Decoded JSON body.

        Returns:
            MetadataRecord with absent keys left empty.
        """
        values = {
            attr: str(payload.get(key) or '')
            for key, attr in _FIELD_MAP.items()
        }
        ratings = tuple(
            Rating(source=str(r.get("Source", '')), value=str(r.get("Value", '')))
            for r in payload.get("Ratings") or []
            if isinstance(r, Mapping)
        )
        return cls(ratings=ratings, **values)

    @property
    def is_movie(self) -> bool:
        """Check if OMDb reports this title as a film."""
        return self.type == MOVIE_TYPE

    @property
    def is_error(self) -> bool:
        """Check if OMDb flagged the response as a failure."""
        return self.response == "False"
