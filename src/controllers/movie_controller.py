"""Controller que demonstra as operações de CRUD sobre filmes."""

import time

from models.movie import Movie
from services.graph.movie_service import MovieService


class MovieController:
    def __init__(self, connector, view) -> None:
        self.view = view
        self.service = MovieService(connector, view=view)

    def demonstrate_crud(self, title: str | None = None) -> None:
        self.view.info("=== Demonstrando operações de CRUD ===")
        # título único para não colidir com dados existentes
        title = title or f"TestMovie_{int(time.time() * 1000)}"
        movie = Movie(title, 2014, "Science Fiction", "A team of explorers travel through a wormhole in space")
        self.service.create_movie(movie)

        retrieved = self.service.get_movie(title)
        if retrieved:
            self.view.info(f"Filme recuperado: {retrieved.title} ({retrieved.year})")

        movie.genre = "Adventure"
        self.service.update_movie(title, movie)
        updated = self.service.get_movie(title)
        if updated:
            self.view.info(f"Gênero atualizado: {updated.genre}")

        self.list_catalog()

        self.service.delete_movie(title)
        self.view.info(f"Filme de teste '{title}' removido")

    def list_catalog(self) -> None:
        self.view.info("Todos os filmes no banco:")
        for m in self.service.get_all_movies():
            self.view.info(f"- {m.title} ({m.year}) - {m.genre}")

        self.view.info("Atores em The Matrix:")
        for actor in self.service.get_actors_in_movie("The Matrix"):
            self.view.info(f"- {actor.name} (Nascimento: {actor.birth_year})")

        self.view.info("Diretores de Inception:")
        for director in self.service.get_directors_of_movie("Inception"):
            self.view.info(f"- {director.name} ({director.nationality})")

        self.view.info("Filmes com Leonardo DiCaprio:")
        for m in self.service.get_movies_by_actor("Leonardo DiCaprio"):
            self.view.info(f"- {m.title} ({m.year})")

        self.view.info("Filmes dirigidos por Christopher Nolan:")
        for m in self.service.get_movies_by_director("Christopher Nolan"):
            self.view.info(f"- {m.title} ({m.year})")
