"""Operações de CRUD de filmes e pessoas sobre o grafo.

Cada operação é uma única consulta parametrizada. Atualizar, remover ou ligar
chaves inexistentes não gera erro: o MATCH simplesmente não encontra nada e a
escrita não tem efeito.
"""

from typing import Optional

from models.movie import Movie
from models.person import Person
from models.relationship import ACTED_IN, DIRECTED
from services.graph.neo4j_connector import Neo4jConnector
from services.graph.record_mapper import movie_from_record, person_from_record
from views.cli import CliView

MERGE_MOVIE = """
MERGE (m:Movie {title: $title})
SET m.year = $year,
    m.genre = $genre,
    m.description = $description
"""

MERGE_PERSON = """
MERGE (p:Person {name: $name})
SET p.birthYear = $birthYear,
    p.nationality = $nationality,
    p.role = coalesce($role, p.role)
"""

MERGE_EDGE = """
MATCH (m:Movie {{title: $movieTitle}}), (p:Person {{name: $personName}})
MERGE (p)-[:{rel_type}]->(m)
"""

MOVIE_COLUMNS = "m.title AS title, m.year AS year, m.genre AS genre, m.description AS description"
PERSON_COLUMNS = "p.name AS name, p.birthYear AS birthYear, p.nationality AS nationality"


def movie_params(movie: Movie) -> dict:
    return {
        "title": movie.title,
        "year": movie.year,
        "genre": movie.genre,
        "description": movie.description,
    }


def person_params(person: Person, role: str | None = None) -> dict:
    return {
        "name": person.name,
        "birthYear": person.birth_year,
        "nationality": person.nationality,
        "role": role,
    }


def edge_query(rel_type: str) -> str:
    if rel_type not in (ACTED_IN, DIRECTED):
        raise ValueError(f"Tipo de relacionamento inválido: {rel_type}")
    return MERGE_EDGE.format(rel_type=rel_type)


class MovieService:
    def __init__(self, connector: Neo4jConnector, view: Optional[CliView] = None) -> None:
        self.connector = connector
        self.view = view or connector.view

    def create_movie(self, movie: Movie) -> None:
        self.connector.execute_write(MERGE_MOVIE, movie_params(movie))
        self.view.info(f"Filme criado: {movie.title}")

    def get_movie(self, title: str) -> Optional[Movie]:
        query = """
        MATCH (m:Movie {title: $title})
        RETURN m.year AS year, m.genre AS genre, m.description AS description
        """
        records = self.connector.execute_read(query, {"title": title})
        if not records:
            return None
        return movie_from_record(records[0], title=title)

    def get_all_movies(self) -> list[Movie]:
        query = f"MATCH (m:Movie) RETURN {MOVIE_COLUMNS} ORDER BY m.title"
        return [movie_from_record(r) for r in self.connector.execute_read(query)]

    def update_movie(self, title: str, movie: Movie) -> None:
        """Sobrescreve year/genre/description do filme `title`; o título não muda."""
        query = """
        MATCH (m:Movie {title: $title})
        SET m.year = $year,
            m.genre = $genre,
            m.description = $description
        """
        params = movie_params(movie)
        params["title"] = title
        self.connector.execute_write(query, params)
        self.view.info(f"Filme atualizado: {title}")

    def delete_movie(self, title: str) -> None:
        self.connector.execute_write("MATCH (m:Movie {title: $title}) DETACH DELETE m", {"title": title})
        self.view.info(f"Filme removido: {title}")

    def add_actor(self, movie_title: str, actor_name: str) -> None:
        self._link(movie_title, actor_name, ACTED_IN)
        self.view.info(f"Ator {actor_name} adicionado ao filme {movie_title}")

    def add_director(self, movie_title: str, director_name: str) -> None:
        self._link(movie_title, director_name, DIRECTED)
        self.view.info(f"Diretor {director_name} adicionado ao filme {movie_title}")

    def get_actors_in_movie(self, movie_title: str) -> list[Person]:
        return self._people_of(movie_title, ACTED_IN)

    def get_directors_of_movie(self, movie_title: str) -> list[Person]:
        return self._people_of(movie_title, DIRECTED)

    def get_movies_by_actor(self, actor_name: str) -> list[Movie]:
        return self._movies_of(actor_name, ACTED_IN)

    def get_movies_by_director(self, director_name: str) -> list[Movie]:
        return self._movies_of(director_name, DIRECTED)

    def create_person(self, person: Person, role: str | None = None) -> None:
        """Upsert de uma Person pelo nome; `role` só é gravado quando informado."""
        self.connector.execute_write(MERGE_PERSON, person_params(person, role))
        self.view.info(f"Pessoa criada: {person.name}")

    def get_person(self, name: str) -> Optional[Person]:
        query = f"MATCH (p:Person {{name: $name}}) RETURN {PERSON_COLUMNS}"
        records = self.connector.execute_read(query, {"name": name})
        if not records:
            return None
        return person_from_record(records[0])

    def _link(self, movie_title: str, person_name: str, rel_type: str) -> None:
        self.connector.execute_write(
            edge_query(rel_type), {"movieTitle": movie_title, "personName": person_name}
        )

    def _people_of(self, movie_title: str, rel_type: str) -> list[Person]:
        query = f"MATCH (p:Person)-[:{rel_type}]->(m:Movie {{title: $movieTitle}}) RETURN {PERSON_COLUMNS}"
        records = self.connector.execute_read(query, {"movieTitle": movie_title})
        return [person_from_record(r) for r in records]

    def _movies_of(self, person_name: str, rel_type: str) -> list[Movie]:
        query = f"MATCH (p:Person {{name: $personName}})-[:{rel_type}]->(m:Movie) RETURN {MOVIE_COLUMNS}"
        records = self.connector.execute_read(query, {"personName": person_name})
        return [movie_from_record(r) for r in records]
