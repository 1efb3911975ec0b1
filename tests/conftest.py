"""
Fixtures compartilhadas.

Os testes unitários usam um driver falso (`unittest.mock`); os de integração
precisam de um Neo4j real e são ignorados quando `NEO4J_URI` não está definido.
"""

from unittest.mock import MagicMock, patch

import pytest

from config.neo4j_config import Neo4jConfig


class FakeResult:
    """Imita `neo4j.Result`: iterável de registros + `consume()`."""

    def __init__(self, rows=None):
        self.rows = list(rows or [])
        self.consumed = False

    def __iter__(self):
        return iter(self.rows)

    def consume(self):
        self.consumed = True
        return MagicMock(name="ResultSummary")


@pytest.fixture
def config():
    return Neo4jConfig("bolt://localhost:7687", "neo4j", "secret", "moviesdb")


@pytest.fixture
def view():
    return MagicMock(name="CliView")


@pytest.fixture
def fake_tx():
    tx = MagicMock(name="ManagedTransaction")
    tx.run.return_value = FakeResult()
    return tx


@pytest.fixture
def fake_session(fake_tx):
    session = MagicMock(name="Session")
    session.__enter__.return_value = session
    session.__exit__.return_value = False  # não engolir exceções
    session.execute_write.side_effect = lambda work, *args: work(fake_tx, *args)
    session.execute_read.side_effect = lambda work, *args: work(fake_tx, *args)
    return session


@pytest.fixture
def fake_driver(fake_session):
    driver = MagicMock(name="Driver")
    driver.session.return_value = fake_session
    return driver


@pytest.fixture
def driver_factory(fake_driver):
    with patch("services.graph.neo4j_connector.GraphDatabase.driver") as factory:
        factory.return_value = fake_driver
        yield factory


@pytest.fixture
def mock_connector(view):
    """Connector falso para testar serviços sem driver."""
    connector = MagicMock(name="Neo4jConnector")
    connector.view = view
    connector.execute_read.return_value = []
    return connector


@pytest.fixture
def make_result():
    return FakeResult
