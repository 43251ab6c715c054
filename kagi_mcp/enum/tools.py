from enum import Enum


class Tools(Enum):
    KAGI_SEARCH = "kagi_search"
