"""Erro de configuração (arquivo de propriedades ausente ou incompleto)."""


class PropertyError(RuntimeError):
    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
