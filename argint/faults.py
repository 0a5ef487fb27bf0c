"""
Argint faults (error kinds, exceptions) and rendering.

Scope
- FaultCode: the closed set of error kinds an option descriptor reports. scan()
  and check() return one of these (or None on success); report() matches on them.
- OptionError: base exception that carries message + options and knows how to
  render itself in a friendly, lowercased way through rich.
- OptionExit: a group of OptionError instances, for drivers that collect faults
  across several descriptors before surfacing them.
- trigger(): central entry point to surface a fault (respecting shell/deferred/fancy/colorful).

Integration
- Lifecycle operations never raise for user input; they return a FaultCode.
- A driver that prefers exceptions converts the code with Argument.fault(...) and
  calls trigger(fault, shell=...). In non-shell mode exceptions are raised; in shell
  mode they are rendered on stderr via rich.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, progname

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes for option descriptors (stable identifiers).

    grouping
    - multiplicity (1310x)
      • MINCOUNT: fewer occurrences than the declared minimum (reported by check()).
      • MAXCOUNT: one occurrence more than the declared maximum (reported by scan()).
    - values (1311x)
      • BADINT: the text is not an integer in any supported notation.
      • OVERFLOW: the integer does not fit a signed 64-bit value.

    normalize() allows host remapping to custom labels while keeping code-stability.
    """
    # --- multiplicity errors (131xx) ---
    MINCOUNT = 13101
    MAXCOUNT = 13102

    # --- value errors (131xx) ---
    BADINT   = 13111
    OVERFLOW = 13112

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _styles(defaults):
    # Host overrides live in __main__.__styles__.
    return defaultdict(str, defaults | getattr(__import__("__main__"), "__styles__", {}))


def _progname(options):
    return progname(options.get("progname"))


class OptionError(Exception):
    """
    Base class for option faults.

    options (all optional)
    - code: FaultCode, title: str, hint: str
    - argument: the descriptor the fault belongs to, text: the offending token
    - progname: str, shell: bool, deferred: bool, fancy: bool, colorful: bool
    """
    __defaults__ = MappingProxyType({
        "title": "option error",
        "hint": "",
        "shell": False,
        "deferred": False,
        "fancy": False,
        "colorful": False,
    })

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(dict(type(self).__defaults__) | options)

    def __str__(self):
        return self.message if self.message is not Unset else ""

    def __rich__(self):
        styles = _styles({
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        })

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not self.options["colorful"]:
                return Text(str(fragment))
            return Text(str(fragment), styles[style])

        code = self.options.get("code")
        header = Text.assemble(
            "[ ",
            text(_progname(self.options), "prog-name"),
            " — ",
            text(code.normalize() if code else "", "code"),
            " | ",
            text(self.options["title"].title(), "error-title"),
            " ]"
        )
        message = text(str(self), "error-message")
        parts = [message]
        if self.options["hint"]:
            parts.append(Text.assemble(text(" → ", "hint-arrow"), text(self.options["hint"], "hint")))

        if self.options["fancy"]:
            return Panel(Group(*parts), title=header, title_align="left")

        return Group(header, *parts)

    def __trigger__(self) -> None:
        if not self.options["shell"]:
            raise self from None
        console.print(self)
        if self.options["deferred"]:
            return
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class MissingOptionError(OptionError):
    __defaults__ = MappingProxyType(OptionError.__defaults__ | {
        "code": FaultCode.MINCOUNT,
        "title": "missing option",
        "hint": "this option must be given more times",
    })


class ExcessOptionError(OptionError):
    __defaults__ = MappingProxyType(OptionError.__defaults__ | {
        "code": FaultCode.MAXCOUNT,
        "title": "excess option",
        "hint": "this option was given too many times",
    })


class InvalidIntegerError(OptionError):
    __defaults__ = MappingProxyType(OptionError.__defaults__ | {
        "code": FaultCode.BADINT,
        "title": "invalid integer",
        "hint": "use decimal (123) or prefixed hex (0x7b), octal (0o173) or binary (0b1111011)",
    })


class IntegerOverflowError(OptionError):
    __defaults__ = MappingProxyType(OptionError.__defaults__ | {
        "code": FaultCode.OVERFLOW,
        "title": "integer overflow",
        "hint": "values must fit a signed 64-bit integer",
    })


_ERRORS = MappingProxyType({
    FaultCode.MINCOUNT: MissingOptionError,
    FaultCode.MAXCOUNT: ExcessOptionError,
    FaultCode.BADINT: InvalidIntegerError,
    FaultCode.OVERFLOW: IntegerOverflowError,
})


def error_type(code, /):
    """
    Return the OptionError subclass matching a fault code.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("error_type() argument must be a fault-code")
    return _ERRORS[code]


class OptionExit(ExceptionGroup[OptionError]):
    def __new__(cls, exceptions, **options):
        return super().__new__(cls, "bad exit", exceptions)

    def __init__(self, exceptions, **options):
        super().__init__("bad exit", tuple(exceptions))
        self.options = MappingProxyType({"shell": False, "fancy": False, "colorful": False} | options)

    def __rich__(self):
        styles = _styles({
            "prog-name": "bold #E6E6F0",  # near-white program name
            "title": "bold #FF4DA6",  # friendly pinky group title (Bad Exit)
        })

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not self.options["colorful"]:
                return Text(str(fragment))
            return Text(str(fragment), styles[style])

        header = Text.assemble(
            "[ ", text(_progname(self.options), "prog-name"), " — ", text(self.message.title(), "title"), " ]"
        )

        renders = []
        for exception in self.exceptions:
            renders.append(copy.replace(exception, colorful=self.options["colorful"], fancy=False))

        if self.options["fancy"]:
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __trigger__(self) -> None:
        if not self.options["shell"]:
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.exceptions, **{**self.options, **overrides})


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via rich console; otherwise, exceptions are raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "OptionError",
    "MissingOptionError",
    "ExcessOptionError",
    "InvalidIntegerError",
    "IntegerOverflowError",
    "OptionExit",
    "error_type",
    "trigger",
)
