"""Conversão de registros do Neo4j em objetos de domínio.

Toda coluna opcional passa por `optional_int`/`optional_str`: valor nulo ou
coluna ausente vira `None`, nunca `0` ou `""`.
"""

from typing import Any, Mapping, Optional

from models.movie import Movie
from models.person import Person


def optional_int(record: Mapping[str, Any], key: str) -> Optional[int]:
    value = record.get(key)
    return None if value is None else int(value)


def optional_str(record: Mapping[str, Any], key: str) -> Optional[str]:
    value = record.get(key)
    return None if value is None else str(value)


def movie_from_record(record: Mapping[str, Any], title: str | None = None) -> Movie:
    """Monta um Movie a partir das colunas title/year/genre/description.

    `title` é usado quando a consulta não devolve a coluna (busca pela chave).
    """
    return Movie(
        title=title if title is not None else str(record["title"]),
        year=optional_int(record, "year"),
        genre=optional_str(record, "genre"),
        description=optional_str(record, "description"),
    )


def person_from_record(record: Mapping[str, Any], name: str | None = None) -> Person:
    return Person(
        name=name if name is not None else str(record["name"]),
        birth_year=optional_int(record, "birthYear"),
        nationality=optional_str(record, "nationality"),
    )
