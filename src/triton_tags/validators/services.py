import json
import string
from typing import Callable, List, Optional, Tuple, TypeVar

from loguru import logger

from ..models import ServiceRecord

T = TypeVar("T")

MAX_LABEL_LENGTH = 63
PORT_RANGE = (1, 65535)
PROPERTY_RANGE = (0, 65535)

_DNS_FIRST = frozenset(string.ascii_letters + string.digits + "-")
_DNS_REST = _DNS_FIRST | {"."}
_SRV_REST = _DNS_FIRST
_SRV_PROTOCOLS = ("._tcp", "._udp")
_DIGITS = frozenset(string.digits)
_PROP_FIRST = frozenset(string.ascii_lowercase)
_PROP_REST = frozenset(string.ascii_lowercase + string.digits + "-")
_VALUE_STOP = frozenset(",:")


class ServiceListSyntaxError(ValueError):
    """
    Erro de sintaxe (ou semântico) ao ler uma lista de serviços.

    `expected` e `found` só são preenchidos nos erros léxicos; nos erros
    semânticos (faixa de porta, tamanho do nome...) ficam vazios.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        line: int,
        column: int,
        expected: Optional[List[str]] = None,
        found: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.offset = offset
        self.line = line
        self.column = column
        self.expected = expected or []
        self.found = found


def _in_range(digits: str, low: int, high: int) -> bool:
    # Mais de 5 dígitos significativos já está fora de qualquer faixa aceita.
    significant = digits.lstrip("0")
    if len(significant) > 5:
        return False
    return low <= int(digits) <= high


def _describe_expected(expected: List[str]) -> str:
    descriptions = sorted(set(expected))
    if len(descriptions) == 1:
        return descriptions[0]
    if len(descriptions) == 2:
        return f"{descriptions[0]} or {descriptions[1]}"
    return ", ".join(descriptions[:-1]) + ", or " + descriptions[-1]


def _describe_found(found: Optional[str]) -> str:
    return "end of input" if found is None else json.dumps(found)


class _ServiceListParser:
    """
    Parser recursivo descendente para:

        list     := service ("," service)* EOF
        service  := label (":" port)? (":" property)*
        label    := [A-Za-z0-9-][A-Za-z0-9.-]* | "_" [A-Za-z0-9-]* ("._tcp" | "._udp")
        port     := [0-9]+
        property := [a-z][a-z0-9-]* "=" [^,:]+

    As falhas só são anotadas na posição mais distante alcançada. Regras com
    nome ("DNS name", "port number"...) escondem as expectativas internas e
    reportam só o próprio nome, na posição onde começaram.

    Uma instância por chamada: nada de estado compartilhado.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self._fail_pos = 0
        self._expected: List[str] = []
        self._silent = 0

    # --- primitivas ---------------------------------------------------------

    def _peek(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def _fail(self, description: str, pos: int) -> None:
        if self._silent or pos < self._fail_pos:
            return
        if pos > self._fail_pos:
            self._fail_pos = pos
            self._expected = []
        self._expected.append(description)

    def _literal(self, literal: str) -> bool:
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        self._fail(json.dumps(literal), self.pos)
        return False

    def _skip(self, chars: frozenset) -> int:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in chars:
            self.pos += 1
        return self.pos - start

    def _skip_until(self, stop: frozenset) -> int:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] not in stop:
            self.pos += 1
        return self.pos - start

    def _named(self, description: str, rule: Callable[[], Optional[T]]) -> Optional[T]:
        start = self.pos
        self._silent += 1
        try:
            result = rule()
        finally:
            self._silent -= 1
        if result is None:
            self.pos = start
            self._fail(description, start)
        return result

    def _location(self, offset: int) -> Tuple[int, int]:
        consumed = self.text[:offset]
        line = consumed.count("\n") + 1
        column = offset - (consumed.rfind("\n") + 1) + 1
        return line, column

    def _semantic_error(self, message: str, offset: int) -> ServiceListSyntaxError:
        line, column = self._location(offset)
        return ServiceListSyntaxError(message, offset, line, column)

    def _syntax_error(self) -> ServiceListSyntaxError:
        offset = self._fail_pos
        found = self.text[offset] if offset < len(self.text) else None
        message = f"Expected {_describe_expected(self._expected)} but {_describe_found(found)} found."
        line, column = self._location(offset)
        return ServiceListSyntaxError(
            message, offset, line, column, expected=sorted(set(self._expected)), found=found
        )

    # --- regras -------------------------------------------------------------

    def parse(self) -> List[ServiceRecord]:
        services: List[ServiceRecord] = []

        service = self._service()
        if service is None:
            raise self._syntax_error()
        services.append(service)

        while True:
            start = self.pos
            if not self._literal(","):
                break
            service = self._service()
            if service is None:
                self.pos = start
                break
            services.append(service)

        if self.pos != len(self.text):
            self._fail("end of input", self.pos)
            raise self._syntax_error()

        return services

    def _service(self) -> Optional[ServiceRecord]:
        name = self._named("DNS name", self._label)
        if name is None:
            return None

        fields = {}

        start = self.pos
        if self._literal(":"):
            port = self._named("port number", self._port)
            if port is None:
                self.pos = start
            else:
                fields["port"] = port

        while True:
            start = self.pos
            if not self._literal(":"):
                break
            prop = self._property()
            if prop is None:
                self.pos = start
                break
            key, value = prop
            fields[key] = value

        return ServiceRecord(name=name, **fields)

    def _label(self) -> Optional[str]:
        start = self.pos
        first = self._peek()

        if first == "_":
            self.pos += 1
            self._skip(_SRV_REST)
            if not any(self._literal(proto) for proto in _SRV_PROTOCOLS):
                return None
        elif first is not None and first in _DNS_FIRST:
            self.pos += 1
            self._skip(_DNS_REST)
        else:
            return None

        label = self.text[start:self.pos].lower()
        if len(label) > MAX_LABEL_LENGTH:
            raise self._semantic_error(
                f'DNS name "{label}" must be {MAX_LABEL_LENGTH} or fewer characters', start
            )
        return label

    def _port(self) -> Optional[str]:
        start = self.pos
        if not self._skip(_DIGITS):
            return None
        text = self.text[start:self.pos]
        low, high = PORT_RANGE
        if not _in_range(text, low, high):
            raise self._semantic_error(
                f"port number {text} must be within the range {low} - {high}", start
            )
        return text

    def _property_name(self) -> Optional[str]:
        start = self.pos
        first = self._peek()
        if first is None or first not in _PROP_FIRST:
            return None
        self.pos += 1
        self._skip(_PROP_REST)
        return self.text[start:self.pos]

    def _property_value(self) -> Optional[str]:
        start = self.pos
        if not self._skip_until(_VALUE_STOP):
            return None
        return self.text[start:self.pos]

    def _property(self) -> Optional[Tuple[str, int | str]]:
        start = self.pos
        key = self._named("property name", self._property_name)
        if key is None:
            return None
        if not self._literal("="):
            return None
        value = self._named("property value", self._property_value)
        if value is None:
            return None

        if key == "port":
            low, high = PORT_RANGE
        elif key in ("priority", "weight"):
            low, high = PROPERTY_RANGE
        else:
            raise self._semantic_error(f'"{key}" is not a valid property name', start)

        if not all(c in _DIGITS for c in value) or not _in_range(value, low, high):
            raise self._semantic_error(
                f'{key} value "{value}" must be within the range {low} - {high}', start
            )
        # a porta guarda o texto original, como no campo posicional
        return key, value if key == "port" else int(value)


def parse_services(text: str) -> List[ServiceRecord]:
    """
    Lê o valor de uma tag triton.cns.services e devolve os serviços na ordem.

    Lança ServiceListSyntaxError quando o texto não segue a gramática.
    """
    return _ServiceListParser(text).parse()


def validate_service_list(value: str) -> None:
    """
    Validador composto do registry. O valor validado é a própria string,
    os registros só servem para aceitar ou rejeitar.
    """
    services = parse_services(value)
    logger.debug("Accepted service list with {} service(s)", len(services))
