import sys

from rich.console import Console
from rich.pretty import pprint
from rich.text import Text

from argint import *

__prog__ = "demo"


number = integer("n", "number", mincount=1, maxcount=3, glossary="numbers to add")


if __name__ == '__main__':
    output = Text()
    for token in sys.argv[1:]:
        if code := number.scan(token):
            number.report(output, code, token, colorful=True)
    if code := number.check():
        number.report(output, code, colorful=True)
    pprint(number)
    Console(stderr=True).print(output, end="")
