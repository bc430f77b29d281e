"""Person detail aggregation."""

from collections.abc import Iterable

from moviedb.api.schemas import PersonDetail, PersonRole
from moviedb.database.store import CatalogStore
from moviedb.services.catalog.errors import NotFound, store_errors
from moviedb.services.catalog.normalizers import cast_rating, decode_characters
from moviedb.services.catalog.validation import reject_query_params
from moviedb.utils.logger import setup_logger

logger = setup_logger("services.catalog.people")


class PersonService:
    """Aggregates person documents from the catalog store."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store
        self._logger = logger

    def get_person(self, person_id: str, params: Iterable[str] = ()) -> PersonDetail:
        """Build the document of one person with their film credits.

        Roles keep store order; category ranking only applies to
        credits listed under a movie.

        Args:
            person_id: IMDb name identifier.
            params: Names of query parameters sent with the request.

        Returns:
            Person with their roles.

        Raises:
            InvalidArgument: If any query parameter was supplied.
            NotFound: If no person has this identifier.
            StoreUnavailable: If the store fails.
        """
        reject_query_params(params)

        with store_errors(self._logger, "person detail"):
            person = self._store.find_person_by_id(person_id)
            if person is None:
                raise NotFound("No record exists of a person with this ID")
            credits = self._store.find_credits_by_person(person_id)

        return PersonDetail(
            name=person.name,
            birth_year=person.birth_year,
            death_year=person.death_year,
            roles=[
                PersonRole(
                    movie_name=credit.movie_title,
                    movie_id=credit.movie_id,
                    category=credit.category,
                    characters=decode_characters(credit.characters),
                    imdb_rating=cast_rating(credit.imdb_rating, digits=1),
                )
                for credit in credits
            ],
        )
