import sys
from typing import Any


def printf(format:str, *args:Any):
    print(format.format(*args), end="")


def printf_err(format:str, *args:Any):
    print(format.format(*args), end="", file=sys.stderr)


def print_result(label:str, value:Any):
    printf("{0:s}: {1!r}\n", label, value)
