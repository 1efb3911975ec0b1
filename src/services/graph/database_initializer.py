"""Cria schema e dados de exemplo quando o banco está vazio.

Cada comando roda na sua própria transação de escrita. Se um deles falhar o
erro sobe e os comandos anteriores permanecem aplicados; rodar de novo é
seguro porque tudo usa IF NOT EXISTS / MERGE.
"""

from typing import Optional

from models.relationship import Relationship
from services.graph import seed_data
from services.graph.movie_service import MERGE_MOVIE, MERGE_PERSON, edge_query, movie_params, person_params
from services.graph.neo4j_connector import Neo4jConnector
from views.cli import CliView

CONSTRAINTS = [
    "CREATE CONSTRAINT movie_title_unique IF NOT EXISTS FOR (m:Movie) REQUIRE m.title IS UNIQUE",
    "CREATE CONSTRAINT person_name_unique IF NOT EXISTS FOR (p:Person) REQUIRE p.name IS UNIQUE",
]

INDEXES = [
    "CREATE INDEX movie_year_index IF NOT EXISTS FOR (m:Movie) ON (m.year)",
    "CREATE INDEX movie_genre_index IF NOT EXISTS FOR (m:Movie) ON (m.genre)",
    "CREATE INDEX person_birth_year_index IF NOT EXISTS FOR (p:Person) ON (p.birthYear)",
    "CREATE INDEX person_nationality_index IF NOT EXISTS FOR (p:Person) ON (p.nationality)",
]


class DatabaseInitializer:
    def __init__(self, connector: Neo4jConnector, view: Optional[CliView] = None) -> None:
        self.connector = connector
        self.view = view or connector.view

    def initialize_database(self) -> bool:
        """Retorna True se o banco estava vazio e foi populado."""
        if not self.connector.is_database_empty():
            self.view.info("Banco já contém dados. Inicialização ignorada.")
            return False

        self.view.info("Banco vazio. Criando schema e inserindo dados iniciais...")
        self.create_constraints()
        self.create_indexes()
        self.insert_sample_data()
        self.create_views()
        self.view.info("Inicialização do banco concluída")
        return True

    def create_constraints(self) -> None:
        for statement in CONSTRAINTS:
            self.connector.execute_write(statement)
        self.view.info("Constraints criadas")

    def create_indexes(self) -> None:
        for statement in INDEXES:
            self.connector.execute_write(statement)
        self.view.info("Índices criados")

    def insert_sample_data(self) -> None:
        for movie in seed_data.MOVIES:
            self.connector.execute_write(MERGE_MOVIE, movie_params(movie))
        for person in seed_data.ACTORS:
            self.connector.execute_write(MERGE_PERSON, person_params(person, role="Actor"))
        for person in seed_data.DIRECTORS:
            self.connector.execute_write(MERGE_PERSON, person_params(person, role="Director"))
        for relation in seed_data.ACTED_IN_EDGES + seed_data.DIRECTED_EDGES:
            self._merge_edge(relation)
        self.view.info("Dados de exemplo inseridos")

    def create_views(self) -> None:
        # Neo4j não tem views; consultas nomeadas cumprem esse papel
        self.view.info("Neo4j não suporta views; etapa ignorada")

    def _merge_edge(self, relation: Relationship) -> None:
        self.connector.execute_write(
            edge_query(relation.type),
            {"movieTitle": relation.target, "personName": relation.source},
        )
