import pytest

from models.movie import Movie
from models.person import Person
from services.graph.movie_service import MovieService, edge_query


@pytest.fixture
def service(mock_connector, view):
    return MovieService(mock_connector, view=view)


def last_call(mock):
    query, params = mock.call_args.args[0], (mock.call_args.args[1] if len(mock.call_args.args) > 1 else {})
    return " ".join(query.split()), params


class TestWrites:
    def test_create_movie_merges_by_title(self, service, mock_connector):
        service.create_movie(Movie("Heat", 1995, "Crime", "LA heist"))

        query, params = last_call(mock_connector.execute_write)
        assert query.startswith("MERGE (m:Movie {title: $title})")
        assert "m.year = $year" in query
        assert params == {"title": "Heat", "year": 1995, "genre": "Crime", "description": "LA heist"}

    def test_create_movie_passes_none_for_missing_fields(self, service, mock_connector):
        service.create_movie(Movie("Untitled"))
        _, params = last_call(mock_connector.execute_write)
        assert params == {"title": "Untitled", "year": None, "genre": None, "description": None}

    def test_update_movie_keeps_title_key(self, service, mock_connector):
        service.update_movie("Heat", Movie("Another title", 1996, "Drama", "changed"))

        query, params = last_call(mock_connector.execute_write)
        assert query.startswith("MATCH (m:Movie {title: $title}) SET")
        assert "MERGE" not in query
        assert "m.title =" not in query
        assert params["title"] == "Heat"
        assert params["year"] == 1996

    def test_delete_movie_detaches(self, service, mock_connector):
        service.delete_movie("Heat")
        query, params = last_call(mock_connector.execute_write)
        assert query == "MATCH (m:Movie {title: $title}) DETACH DELETE m"
        assert params == {"title": "Heat"}

    @pytest.mark.parametrize(
        "method, rel_type",
        [("add_actor", "ACTED_IN"), ("add_director", "DIRECTED")],
    )
    def test_add_person_matches_both_ends_then_merges_edge(self, service, mock_connector, method, rel_type):
        getattr(service, method)("The Matrix", "Keanu Reeves")

        query, params = last_call(mock_connector.execute_write)
        assert query.startswith("MATCH (m:Movie {title: $movieTitle}), (p:Person {name: $personName})")
        assert query.endswith(f"MERGE (p)-[:{rel_type}]->(m)")
        assert params == {"movieTitle": "The Matrix", "personName": "Keanu Reeves"}

    def test_create_person_with_role(self, service, mock_connector):
        service.create_person(Person("Michael Mann", 1943, "American"), role="Director")
        query, params = last_call(mock_connector.execute_write)
        assert query.startswith("MERGE (p:Person {name: $name})")
        assert params == {"name": "Michael Mann", "birthYear": 1943, "nationality": "American", "role": "Director"}

    def test_each_write_is_one_round_trip(self, service, mock_connector):
        service.create_movie(Movie("Heat"))
        service.update_movie("Heat", Movie("Heat", 1995))
        service.delete_movie("Heat")
        assert mock_connector.execute_write.call_count == 3
        mock_connector.execute_read.assert_not_called()


class TestReads:
    def test_get_movie_not_found_returns_none(self, service, mock_connector):
        mock_connector.execute_read.return_value = []
        assert service.get_movie("nonexistent-title") is None

    def test_get_movie_uses_requested_title(self, service, mock_connector):
        mock_connector.execute_read.return_value = [{"year": 1999, "genre": "Science Fiction", "description": None}]

        movie = service.get_movie("The Matrix")

        assert movie == Movie("The Matrix", 1999, "Science Fiction", None)
        query, params = last_call(mock_connector.execute_read)
        assert query.startswith("MATCH (m:Movie {title: $title})")
        assert params == {"title": "The Matrix"}

    def test_get_all_movies_orders_by_title(self, service, mock_connector):
        mock_connector.execute_read.return_value = [
            {"title": "Inception", "year": 2010, "genre": "Science Fiction", "description": "dreams"},
            {"title": "The Matrix", "year": None, "genre": None, "description": None},
        ]

        movies = service.get_all_movies()

        query, _ = last_call(mock_connector.execute_read)
        assert query.endswith("ORDER BY m.title")
        assert [m.title for m in movies] == ["Inception", "The Matrix"]
        assert movies[1].year is None

    def test_get_actors_in_movie(self, service, mock_connector):
        mock_connector.execute_read.return_value = [
            {"name": "Keanu Reeves", "birthYear": 1964, "nationality": "Canadian"},
        ]

        actors = service.get_actors_in_movie("The Matrix")

        assert actors == [Person("Keanu Reeves", 1964, "Canadian")]
        query, params = last_call(mock_connector.execute_read)
        assert query.startswith("MATCH (p:Person)-[:ACTED_IN]->(m:Movie {title: $movieTitle})")
        assert params == {"movieTitle": "The Matrix"}

    def test_get_directors_of_movie(self, service, mock_connector):
        mock_connector.execute_read.return_value = [
            {"name": "Lana Wachowski", "birthYear": 1965, "nationality": "American"},
            {"name": "Lilly Wachowski", "birthYear": None, "nationality": None},
        ]

        directors = service.get_directors_of_movie("The Matrix")

        assert [d.name for d in directors] == ["Lana Wachowski", "Lilly Wachowski"]
        assert directors[1].birth_year is None
        query, _ = last_call(mock_connector.execute_read)
        assert "-[:DIRECTED]->" in query

    def test_get_movies_by_actor(self, service, mock_connector):
        mock_connector.execute_read.return_value = [
            {"title": "Inception", "year": 2010, "genre": "Science Fiction", "description": "dreams"},
        ]

        movies = service.get_movies_by_actor("Leonardo DiCaprio")

        assert movies == [Movie("Inception", 2010, "Science Fiction", "dreams")]
        query, params = last_call(mock_connector.execute_read)
        assert query.startswith("MATCH (p:Person {name: $personName})-[:ACTED_IN]->(m:Movie)")
        assert params == {"personName": "Leonardo DiCaprio"}

    def test_get_movies_by_director(self, service, mock_connector):
        mock_connector.execute_read.return_value = [
            {"title": "Inception", "year": 2010, "genre": "Science Fiction", "description": None},
        ]

        movies = service.get_movies_by_director("Christopher Nolan")

        assert movies[0].title == "Inception"
        assert movies[0].year == 2010
        query, _ = last_call(mock_connector.execute_read)
        assert "-[:DIRECTED]->(m:Movie)" in query

    def test_empty_results_give_empty_lists(self, service):
        assert service.get_actors_in_movie("Nothing") == []
        assert service.get_movies_by_director("Nobody") == []

    def test_get_person(self, service, mock_connector):
        assert service.get_person("Nobody") is None
        mock_connector.execute_read.return_value = [{"name": "Heath Ledger", "birthYear": 1979, "nationality": "Australian"}]
        assert service.get_person("Heath Ledger") == Person("Heath Ledger", 1979, "Australian")


def test_edge_query_rejects_unknown_types():
    with pytest.raises(ValueError):
        edge_query("LIKES); MATCH (n) DETACH DELETE n //")
