from enum import Enum


class TagType(str, Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    GROUP_LIST = "group_list"
    SERVICE_LIST = "service_list"
