from typing import Any, Optional


class TagError(ValueError):
    """
    Falha de validação de uma tag especial.

    Nunca é lançada pelo parse/validate: volta como valor para o chamador.
    """

    def __init__(self, key: str, value: Any, message: str) -> None:
        super().__init__(message)
        self.key = key
        self.value = value

    @property
    def message(self) -> str:
        return str(self)


class UnrecognizedTagError(TagError):
    pass


class InvalidBooleanError(TagError):
    pass


class InvalidNumberError(TagError):
    pass


class InvalidGroupListError(TagError):
    pass


class InvalidServiceListError(TagError):
    def __init__(self, key: str, value: Any, message: str, parser_error: Optional[Exception] = None) -> None:
        super().__init__(key, value, message)
        self.parser_error = parser_error


class RegistryConfigError(ValueError):
    pass
