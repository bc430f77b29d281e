"""Movie search and detail aggregation.

Turns rows of the catalog store into the client documents of the
movie endpoints: filtered, paginated search results and the full
movie document with its ratings and ranked credits.
"""

from collections.abc import Iterable

from moviedb.api.schemas import (
    MovieCredit,
    MovieDetail,
    MovieRating,
    MovieSearchResponse,
    MovieSummary,
)
from moviedb.database.models import Movie
from moviedb.database.store import CatalogStore
from moviedb.services.catalog.errors import NotFound, store_errors
from moviedb.services.catalog.normalizers import (
    cast_rating,
    decode_characters,
    normalize_rating,
    split_genres,
)
from moviedb.services.catalog.pagination import PER_PAGE, Pagination, page_offset
from moviedb.services.catalog.ranking import rank_credits
from moviedb.services.catalog.validation import parse_page, parse_year, reject_query_params
from moviedb.utils.logger import setup_logger

logger = setup_logger("services.catalog.movies")


class MovieService:
    """Aggregates movie documents from the catalog store.

    Attributes:
        _store: Catalog reads for the current request.
    """

    def __init__(self, store: CatalogStore) -> None:
        """Initialize service.

        Args:
            store: Catalog store bound to a request session.
        """
        self._store = store
        self._logger = logger

    def search(
        self,
        title: str | None = None,
        year: str | None = None,
        page: str | int | None = None,
    ) -> MovieSearchResponse:
        """Search movies by title substring and release year.

        Data and total come from two separate queries; under
        concurrent writes they may disagree slightly.

        Args:
            title: Case-insensitive substring of the title.
            year: Release year, exactly four digits.
            page: 1-indexed page number, defaults to 1.

        Returns:
            One page of movies with pagination metadata.

        Raises:
            InvalidArgument: If page or year is malformed.
            StoreUnavailable: If the store fails.
        """
        page_number = parse_page(page)
        year_number = parse_year(year)
        offset = page_offset(page_number)

        with store_errors(self._logger, "movie search"):
            total = self._store.count_movies(title, year_number)
            movies = self._store.find_movies(title, year_number, PER_PAGE, offset)

        self._logger.debug(
            "Search title=%r year=%s page=%d -> %d/%d", title, year_number, page_number, len(movies), total
        )
        return MovieSearchResponse(
            data=[self._to_summary(movie) for movie in movies],
            pagination=Pagination.compute(total, page_number, len(movies)),
        )

    def get_movie(self, movie_id: str, params: Iterable[str] = ()) -> MovieDetail:
        """Build the full document of one movie.

        Args:
            movie_id: IMDb title identifier.
            params: Names of query parameters sent with the request.

        Returns:
            Movie with genres, normalized ratings and ranked credits.

        Raises:
            InvalidArgument: If any query parameter was supplied.
            NotFound: If no movie has this identifier.
            StoreUnavailable: If the store fails.
        """
        reject_query_params(params)

        with store_errors(self._logger, "movie detail"):
            movie = self._store.find_movie_by_id(movie_id)
            if movie is None:
                raise NotFound("No record exists of a movie with this ID")
            ratings = self._store.find_ratings_by_movie(movie_id)
            credits = self._store.find_credits_by_movie(movie_id)

        principals = [
            MovieCredit(
                id=credit.person_id,
                name=credit.name,
                category=credit.category,
                characters=decode_characters(credit.characters),
            )
            for credit in credits
        ]
        return MovieDetail(
            title=movie.title,
            year=movie.year,
            runtime=movie.runtime,
            genres=split_genres(movie.genres),
            country=movie.country,
            principals=rank_credits(principals),
            ratings=[
                MovieRating(source=rating.source, value=normalize_rating(rating.value))
                for rating in ratings
            ],
            box_office=movie.box_office,
            plot=movie.plot,
            poster=movie.poster,
        )

    @staticmethod
    def _to_summary(movie: Movie) -> MovieSummary:
        """Convert a movie row to a search result item."""
        return MovieSummary(
            title=movie.title,
            year=movie.year,
            imdb_id=movie.imdb_id,
            imdb_rating=cast_rating(movie.imdb_rating, digits=1),
            rotten_tomatoes_rating=cast_rating(movie.rotten_tomatoes_rating),
            metacritic_rating=cast_rating(movie.metacritic_rating),
            classification=movie.classification,
        )
