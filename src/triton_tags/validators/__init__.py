from .groups import GroupListError, validate_group_list
from .services import ServiceListSyntaxError, parse_services, validate_service_list

# Erros que os validadores compostos usam para rejeitar um valor.
VALIDATION_ERRORS = (GroupListError, ServiceListSyntaxError)

__all__ = [
    "GroupListError",
    "ServiceListSyntaxError",
    "VALIDATION_ERRORS",
    "parse_services",
    "validate_group_list",
    "validate_service_list",
]
