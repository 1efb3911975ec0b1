"""Relacionamentos usados no grafo."""

from dataclasses import dataclass

ACTED_IN = "ACTED_IN"
DIRECTED = "DIRECTED"


@dataclass(frozen=True)
class Relationship:
    source: str  # nome da Person
    target: str  # título do Movie
    type: str = ACTED_IN
