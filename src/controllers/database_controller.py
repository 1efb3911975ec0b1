"""Controller que prepara o banco (schema + dados de exemplo)."""

from services.graph.database_initializer import DatabaseInitializer


class DatabaseController:
    def __init__(self, connector, view) -> None:
        self.view = view
        self.initializer = DatabaseInitializer(connector, view=view)

    def initialize(self) -> bool:
        self.view.info("Verificando estado do banco")
        return self.initializer.initialize_database()
