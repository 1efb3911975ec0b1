"""Catálogo fixo de dados de exemplo inserido num banco vazio."""

from models.movie import Movie
from models.person import Person
from models.relationship import ACTED_IN, DIRECTED, Relationship

MOVIES = [
    Movie("The Matrix", 1999, "Science Fiction", "A computer hacker learns about the true nature of reality"),
    Movie("Inception", 2010, "Science Fiction", "A thief who steals corporate secrets through dream-sharing technology"),
    Movie("The Shawshank Redemption", 1994, "Drama", "Two imprisoned men bond over years, finding redemption"),
    Movie("Pulp Fiction", 1994, "Crime", "The lives of two mob hitmen intertwine with multiple storylines"),
    Movie("The Dark Knight", 2008, "Action", "Batman faces the Joker in a battle for Gotham's soul"),
]

ACTORS = [
    Person("Keanu Reeves", 1964, "Canadian"),
    Person("Leonardo DiCaprio", 1974, "American"),
    Person("Tim Robbins", 1958, "American"),
    Person("Morgan Freeman", 1937, "American"),
    Person("John Travolta", 1954, "American"),
    Person("Christian Bale", 1974, "British"),
    Person("Heath Ledger", 1979, "Australian"),
]

DIRECTORS = [
    Person("Lana Wachowski", 1965, "American"),
    Person("Lilly Wachowski", 1967, "American"),
    Person("Christopher Nolan", 1970, "British"),
    Person("Frank Darabont", 1959, "American"),
    Person("Quentin Tarantino", 1963, "American"),
]

ACTED_IN_EDGES = [
    Relationship("Keanu Reeves", "The Matrix", ACTED_IN),
    Relationship("Leonardo DiCaprio", "Inception", ACTED_IN),
    Relationship("Leonardo DiCaprio", "The Shawshank Redemption", ACTED_IN),
    Relationship("Morgan Freeman", "The Shawshank Redemption", ACTED_IN),
    Relationship("John Travolta", "Pulp Fiction", ACTED_IN),
    Relationship("Christian Bale", "The Dark Knight", ACTED_IN),
    Relationship("Heath Ledger", "The Dark Knight", ACTED_IN),
]

DIRECTED_EDGES = [
    Relationship("Lana Wachowski", "The Matrix", DIRECTED),
    Relationship("Lilly Wachowski", "The Matrix", DIRECTED),
    Relationship("Christopher Nolan", "Inception", DIRECTED),
    Relationship("Christopher Nolan", "The Dark Knight", DIRECTED),
    Relationship("Frank Darabont", "The Shawshank Redemption", DIRECTED),
    Relationship("Quentin Tarantino", "Pulp Fiction", DIRECTED),
]
