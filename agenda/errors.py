# agenda/errors.py
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    EMPTY_MESSAGE = "EmptyMessage"
    DATE_NOT_FOUND = "DateNotFound"
    INVALID_DATE = "InvalidDate"
    INVALID_DAY_OF_MONTH = "InvalidDayOfMonth"
    INVALID_RELATIVE_DAY_COUNT = "InvalidRelativeDayCount"
    TIME_NOT_FOUND = "TimeNotFound"
    INVALID_TIME = "InvalidTime"
    EMPTY_TITLE = "EmptyTitle"
    PERSISTENCE_FAILURE = "PersistenceFailure"


# User-facing (pt-BR) default messages, one per kind.
DEFAULT_MESSAGES = {
    ErrorKind.EMPTY_MESSAGE: "Mensagem é obrigatória",
    ErrorKind.DATE_NOT_FOUND: "Nenhuma data encontrada na mensagem",
    ErrorKind.INVALID_DATE: "Data inválida na mensagem",
    ErrorKind.INVALID_DAY_OF_MONTH: "Dia do mês inválido (use de 1 a 31)",
    ErrorKind.INVALID_RELATIVE_DAY_COUNT: "Quantidade de dias inválida (use 1 ou mais)",
    ErrorKind.TIME_NOT_FOUND: "Hora não encontrada na mensagem",
    ErrorKind.INVALID_TIME: "Hora inválida na mensagem",
    ErrorKind.EMPTY_TITLE: "Título do compromisso está vazio",
    ErrorKind.PERSISTENCE_FAILURE: "Falha ao salvar o compromisso",
}


class AgendaError(Exception):
    """
    The one failure type of the resolution core and the persistence layer.
    `kind` says what went wrong; `message` is safe to show to the user.
    """

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    @property
    def is_client_error(self) -> bool:
        """Everything except a storage failure is caused by the input text."""
        return self.kind is not ErrorKind.PERSISTENCE_FAILURE

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind.value}

    def __repr__(self) -> str:  # pragma: no cover
        return f"<AgendaError(kind={self.kind.value!r}, message={self.message!r})>"
