from enum import Enum


class Color(str, Enum):
    RED = 'RED'
    GREEN = 'GREEN'
