"""
CLI de demonstração: conecta no Neo4j, prepara o banco e executa o CRUD de filmes.
Este módulo delega a controllers especializados para cada etapa.
"""

import argparse
import os

from config.neo4j_config import Neo4jConfig
from controllers.database_controller import DatabaseController
from controllers.movie_controller import MovieController
from services.graph.neo4j_connector import Neo4jConnector
from views.cli import CliView


class App:
    def __init__(self, config: Neo4jConfig, view: CliView | None = None) -> None:
        self.view = view or CliView()
        self.connector = Neo4jConnector(config, view=self.view)
        self.database_controller = DatabaseController(self.connector, self.view)
        self.movie_controller = MovieController(self.connector, self.view)

    def run(self) -> None:
        """Fluxo principal: inicialização do banco -> demonstração de CRUD."""
        try:
            self.database_controller.initialize()
            self.movie_controller.demonstrate_crud()
        finally:
            self.connector.close()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Demonstração de CRUD de filmes no Neo4j.")
    parser.add_argument("--config", type=str, default=None, help="Arquivo de propriedades (padrão: application.properties).")
    parser.add_argument("--neo4j-uri", type=str, default=None, help="URI do Neo4j (ex.: bolt://localhost:7687).")
    parser.add_argument("--neo4j-user", type=str, default=None, help="Usuário do Neo4j.")
    parser.add_argument("--neo4j-password", type=str, default=None, help="Senha do Neo4j.")
    parser.add_argument("--neo4j-database", type=str, default=None, help="Nome do database.")
    parser.add_argument("--verbose", action="store_true", help="Mostra mensagens de debug.")
    args = parser.parse_args(argv)

    # Override de configs via CLI (prioridade acima do .env e do arquivo)
    if args.neo4j_uri:
        os.environ["NEO4J_URI"] = args.neo4j_uri
    if args.neo4j_user:
        os.environ["NEO4J_USERNAME"] = args.neo4j_user
    if args.neo4j_password:
        os.environ["NEO4J_PASSWORD"] = args.neo4j_password
    if args.neo4j_database:
        os.environ["NEO4J_DATABASE"] = args.neo4j_database

    view = CliView(verbose=args.verbose)
    try:
        config = Neo4jConfig.from_properties(args.config)
        App(config, view=view).run()
    except Exception as exc:
        view.error(f"Erro na aplicação Neo4j: {exc!r}")


if __name__ == "__main__":
    main()
