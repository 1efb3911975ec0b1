"""Conexão única com o Neo4j e primitivas de leitura/escrita transacionais.

Cada chamada abre uma sessão própria, roda a consulta dentro de uma transação
gerenciada pelo driver e fecha a sessão antes de retornar. O driver é criado
uma vez e compartilhado por todos os serviços até `close()`.
"""

from typing import Any, Optional

from neo4j import Driver, GraphDatabase, Record, Session

from config.neo4j_config import Neo4jConfig
from views.cli import CliView


class Neo4jConnector:
    def __init__(self, config: Neo4jConfig, view: Optional[CliView] = None) -> None:
        self.config = config
        self.view = view or CliView()
        self.driver: Optional[Driver] = GraphDatabase.driver(
            config.uri, auth=(config.username, config.password)
        )
        try:
            # falha já no construtor se o servidor não responde ou recusa a senha
            self.driver.verify_connectivity()
        except Exception:
            self.driver.close()
            self.driver = None
            raise
        self.view.info(f"Conectado ao Neo4j em {config.masked_uri()}")

    def __enter__(self) -> "Neo4jConnector":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def session(self) -> Session:
        if self.driver is None:
            raise RuntimeError("Conexão com o Neo4j já foi encerrada")
        return self.driver.session(database=self.config.database)

    def close(self) -> None:
        if self.driver is None:
            return
        self.driver.close()
        self.driver = None
        self.view.info("Conexão com o Neo4j encerrada")

    def execute_write(self, query: str, parameters: dict[str, Any] | None = None) -> None:
        with self.session() as session:
            session.execute_write(self._run_write, query, parameters or {})
        self.view.info(f"Write query executada: {query}")

    def execute_read(self, query: str, parameters: dict[str, Any] | None = None) -> list[Record]:
        """Roda a consulta numa transação de leitura e devolve os registros.

        Os registros são materializados dentro da transação; a sessão é
        liberada ao sair do bloco, inclusive em caso de erro.
        """
        with self.session() as session:
            records = session.execute_read(self._run_read, query, parameters or {})
        self.view.info(f"Read query executada: {query}")
        self.view.debug(f"{len(records)} registro(s) retornado(s)")
        return records

    def is_database_empty(self) -> bool:
        records = self.execute_read("MATCH (n) RETURN count(n) AS count")
        count = records[0]["count"] if records else 0
        self.view.info(f"Quantidade de nodes no banco: {count}")
        return count == 0

    @staticmethod
    def _run_write(tx, query: str, parameters: dict[str, Any]):
        return tx.run(query, parameters).consume()

    @staticmethod
    def _run_read(tx, query: str, parameters: dict[str, Any]) -> list[Record]:
        return list(tx.run(query, parameters))
