"""Parâmetros de conexão com o Neo4j.

Fonte principal: um arquivo de propriedades `chave=valor` (por padrão
`application.properties`). Variáveis de ambiente `NEO4J_*`, inclusive as
carregadas de um `.env`, têm prioridade sobre o arquivo.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values, load_dotenv

from exceptions.property_error import PropertyError

load_dotenv()

DEFAULT_PROPERTIES_FILE = "application.properties"

# chave no arquivo -> variável de ambiente que sobrescreve
PROPERTY_KEYS = {
    "neo4j.uri": "NEO4J_URI",
    "neo4j.username": "NEO4J_USERNAME",
    "neo4j.password": "NEO4J_PASSWORD",
    "neo4j.database": "NEO4J_DATABASE",
}


@dataclass(frozen=True)
class Neo4jConfig:
    uri: str
    username: str
    password: str
    database: str

    @classmethod
    def from_properties(cls, path: str | os.PathLike | None = None) -> "Neo4jConfig":
        path = Path(path or os.getenv("NEO4J_PROPERTIES", DEFAULT_PROPERTIES_FILE))
        if not path.is_file():
            raise PropertyError(f"Arquivo de propriedades não encontrado: {path}")
        try:
            props = dotenv_values(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise PropertyError(f"Falha ao ler {path}: {exc}") from exc

        values = {}
        for key, env_var in PROPERTY_KEYS.items():
            value = os.getenv(env_var) or props.get(key)
            if not value or not value.strip():
                raise PropertyError(f"Propriedade obrigatória ausente: {key}", key=key)
            values[key] = value.strip()

        return cls(
            uri=values["neo4j.uri"],
            username=values["neo4j.username"],
            password=values["neo4j.password"],
            database=values["neo4j.database"],
        )

    def masked_uri(self) -> str:
        return re.sub(r"://([^:/@]+):([^@]+)@", r"://\1:***@", self.uri)

    def __repr__(self) -> str:
        return (
            f"Neo4jConfig(uri={self.masked_uri()!r}, username={self.username!r}, "
            f"password='***', database={self.database!r})"
        )
