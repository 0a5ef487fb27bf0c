r"""
Argint argument descriptors.

Overview
- Argument: the lifecycle contract every option type implements so a generic
  driver can treat heterogeneous descriptors alike:
  • reset()                               rewind to zero occurrences
  • scan(text=None)                       consume one occurrence
  • check()                               enforce multiplicity once input is exhausted
  • report(output, code, text, progname)  append a one-line diagnostic
  scan() and check() return None on success, otherwise a FaultCode.

- Integer: a signed 64-bit integer option (hex, octal, binary or decimal text).
- Factories
  • integer(...): any multiplicity.
  • optional_integer(...): at most once (0..1).
  • required_integer(...): exactly once (1..1).

Metadata (sanitized on construction)
- shortopts: "nN" or an iterable of single characters; each a letter or digit.
- longopts: "number,num" or an iterable of names matching r"[^\W\d_](-?[^\W_]+)*".
- datatype: str | None (defaults per type, "<int>" for Integer).
- glossary: str | None.
- mincount: int >= 0; maxcount: int, silently raised to mincount when smaller.

Driver contract
    >>> output = Text()
    >>> number = integer("n", "number", mincount=1, maxcount=2)
    >>> for text in ("0x1A", "12"):
    ...     if code := number.scan(text):
    ...         number.report(output, code, text, "prog")
    >>> if code := number.check():
    ...     number.report(output, code, None, "prog")
    >>> number.values
    (26, 12)

Tracing
- Descriptors log lifecycle events at DEBUG on the injected logger (logger=...),
  falling back to this module's logger.
"""
import functools
import logging
import operator
import re
from abc import ABCMeta, abstractmethod
from collections.abc import Iterable

from rich.text import Text

from .faults import FaultCode, error_type
from .scanning import scan_integer
from .utils import *
from .utils import progname as _resolve_progname

log = logging.getLogger(__name__)


class ArgumentType(ABCMeta):
    """
    Metaclass for descriptors: read-only introspection and stable representations.

    Responsibilities
    - __typename__ derived from the class name (camel-case split with hyphens),
      used in construction errors.
    - Read-only properties (via mirror()) for every name in __introspectable__.
    - __repr__/__rich_repr__ built from __displayable__ (or __introspectable__).
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
            **options
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise, stable representation with key metadata.

            Example
            - integer(shortopts=('n',), longopts=('number',), datatype='<int>', ...)
            """
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield (name, object) pairs for pretty printers.
            """
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _split(object, separator):
    # Accept the compact string forms ("nN", "number,num") or any iterable of strings.
    if object is None:
        return ()
    if isinstance(object, str):
        return tuple(filter(None, object.split(separator))) if separator else tuple(object)
    if not isinstance(object, Iterable):
        raise TypeError
    return tuple(object)


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: validate and normalize descriptor metadata in place.

    Responsibilities
    - shortopts: tuple of single letters/digits, no duplicates.
    - longopts: tuple of shell-style names without leading dashes, no duplicates.
    - datatype: defaults to cls.__datatype__ when None; must be a string otherwise.
    - glossary: None or a string.
    - mincount: non-negative integer.
    - maxcount: integer; raised to mincount when smaller.

    Raises
    - TypeError: wrong types.
    - ValueError: malformed names, duplicates, negative mincount.
    """
    try:
        shortopts = _split(metadata["shortopts"], "")
    except TypeError:
        raise TypeError(f"{cls.__typename__} 'shortopts' must be a string or an iterable of strings") from None
    for option in shortopts:
        if not isinstance(option, str):
            raise TypeError(f"{cls.__typename__} 'shortopts' must contain strings")
        elif not re.fullmatch(r"[^\W_]", option):
            raise ValueError(f"{cls.__typename__} short options must be single letters or digits")
    if len(set(shortopts)) != len(shortopts):
        raise ValueError(f"{cls.__typename__} 'shortopts' cannot contain duplicates")
    metadata["shortopts"] = shortopts

    try:
        longopts = _split(metadata["longopts"], ",")
    except TypeError:
        raise TypeError(f"{cls.__typename__} 'longopts' must be a string or an iterable of strings") from None
    for option in longopts:
        if not isinstance(option, str):
            raise TypeError(f"{cls.__typename__} 'longopts' must contain strings")
        elif not re.fullmatch(r"[^\W\d_](-?[^\W_]+)*", option):
            raise ValueError(f"{cls.__typename__} long options must be valid shell-style names without dashes")
    if len(set(longopts)) != len(longopts):
        raise ValueError(f"{cls.__typename__} 'longopts' cannot contain duplicates")
    metadata["longopts"] = longopts

    if (datatype := metadata["datatype"]) is None:
        datatype = cls.__datatype__
    elif not isinstance(datatype, str):
        raise TypeError(f"{cls.__typename__} 'datatype' must be a string")
    metadata["datatype"] = datatype

    if not isinstance(metadata["glossary"], str | None):
        raise TypeError(f"{cls.__typename__} 'glossary' must be a string")

    for name in ("mincount", "maxcount"):
        if not isinstance(metadata[name], int) or isinstance(metadata[name], bool):
            raise TypeError(f"{cls.__typename__} {name!r} must be an integer")
    if metadata["mincount"] < 0:
        raise ValueError(f"{cls.__typename__} 'mincount' cannot be negative")
    metadata["maxcount"] = max(metadata["maxcount"], metadata["mincount"])


class Argument(metaclass=ArgumentType):
    """
    Abstract option descriptor.

    Subclasses set __datatype__ and implement the four lifecycle operations.
    The header fields are exposed read-only through __introspectable__.
    """

    __introspectable__ = (
        "shortopts",
        "longopts",
        "datatype",
        "glossary",
        "mincount",
        "maxcount",
    )
    __datatype__ = None

    def __init__(
            self,
            shortopts=None,
            longopts=None,
            datatype=None,
            mincount=0,
            maxcount=1,
            glossary=None,
            *,
            logger=None
    ):
        metadata = {
            "shortopts": shortopts,
            "longopts": longopts,
            "datatype": datatype,
            "glossary": glossary,
            "mincount": mincount,
            "maxcount": maxcount,
        }
        _sanitize_metadata(type(self), metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)

        self._count = 0
        self._logger = logger or log

    @property
    def count(self):
        """
        Number of occurrences recorded in the current parse pass.
        """
        return self._count

    @abstractmethod
    def reset(self):
        """
        Rewind to zero occurrences without releasing storage.
        """

    @abstractmethod
    def scan(self, text=None, /):
        """
        Consume one occurrence. Returns None on success, otherwise a FaultCode.
        """

    @abstractmethod
    def check(self):
        """
        Validate multiplicity after scanning. Returns None or FaultCode.MINCOUNT.
        """

    @abstractmethod
    def report(self, output, code, text=None, progname=None, /, *, colorful=False):
        """
        Append a one-line diagnostic for `code` to `output` (a rich Text).
        """

    def fault(self, code, text=None, progname=None, /):
        """
        Build the OptionError matching `code`, whose message is the report line.

        Drivers that prefer exceptions call trigger(argument.fault(code, text)).
        """
        code = FaultCode(code)
        output = Text()
        self.report(output, code, text, progname)
        return error_type(code)(
            output.plain.rstrip("\n"),
            code=code,
            argument=self,
            text=text,
            progname=_resolve_progname(progname),
        )

    def __str__(self):
        return syntax(self._shortopts, self._longopts, self._datatype)


class Integer(Argument):
    """
    Signed 64-bit integer option.

    Storage
    - maxcount zero-initialized slots are allocated once at construction and
      never grown; values holds the first `count` of them.
    - An occurrence without text (omitted optional value) is counted but leaves
      its slot untouched.

    Text is read by scan_integer(): "0x1A", "0o17", "0b101" or "123", with an
    optional sign; the whole token must be consumed.
    """

    __datatype__ = "<int>"
    __displayable__ = Argument.__introspectable__ + ("count", "values")

    def __init__(
            self,
            shortopts=None,
            longopts=None,
            datatype=None,
            mincount=0,
            maxcount=1,
            glossary=None,
            *,
            logger=None
    ):
        super().__init__(shortopts, longopts, datatype, mincount, maxcount, glossary, logger=logger)
        self._ival = [0] * self._maxcount
        self._logger.debug("%s created (mincount=%d, maxcount=%d)", self, self._mincount, self._maxcount)

    @property
    def values(self):
        """
        Values stored in the current parse pass, in occurrence order.
        """
        return tuple(self._ival[:self._count])

    def reset(self):
        self._logger.debug("%s reset", self)
        self._count = 0

    def scan(self, text=None, /):
        if self._count == self._maxcount:
            code = FaultCode.MAXCOUNT
        elif text is None:
            # Optional value omitted: count the occurrence, keep the slot as it was.
            self._count += 1
            code = None
        else:
            value, _, code = scan_integer(text)
            if code is None:
                self._ival[self._count] = value
                self._count += 1

        self._logger.debug("%s scan(%r) -> %s", self, text, code and code.name)
        return code

    def check(self):
        code = FaultCode.MINCOUNT if self._count < self._mincount else None
        self._logger.debug("%s check() -> %s", self, code and code.name)
        return code

    def report(self, output, code, text=None, progname=None, /, *, colorful=False):
        """
        Append the diagnostic for `code` to `output`.

        Lines (prefixed with "<progname>: ")
        - MINCOUNT → missing option -n|--number=<int>
        - MAXCOUNT → excess option -n|--number=<text>
        - BADINT   → invalid argument "<text>" to option -n|--number=<int>
        - OVERFLOW → integer overflow at option -n|--number=<int> (<text> is too large)

        A missing text is rendered as an empty string. Codes outside FaultCode
        append nothing. With colorful=True the fragments are styled (host
        overrides via __main__.__styles__).
        """
        text = text if text is not None else ""
        shortopts, longopts, datatype = self._shortopts, self._longopts, self._datatype

        match code:
            case FaultCode.MINCOUNT:
                fragments = (
                    ("missing option ", "message"),
                    (syntax(shortopts, longopts, datatype), "option"),
                    ("\n", ""),
                )
            case FaultCode.MAXCOUNT:
                fragments = (
                    ("excess option ", "message"),
                    (syntax(shortopts, longopts, text), "option"),
                    ("\n", ""),
                )
            case FaultCode.BADINT:
                fragments = (
                    ("invalid argument ", "message"),
                    (f'"{text}"', "value"),
                    (" to option ", "message"),
                    (syntax(shortopts, longopts, datatype), "option"),
                    ("\n", ""),
                )
            case FaultCode.OVERFLOW:
                fragments = (
                    ("integer overflow at option ", "message"),
                    (syntax(shortopts, longopts, datatype), "option"),
                    (" (", "message"),
                    (text, "value"),
                    (" is too large)", "message"),
                    ("\n", ""),
                )
            case _:
                return

        styles = {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "message": "#C8C8D0",  # soft light gray message
            "option": "bold #00E5FF",  # neon cyan option spelling
            "value": "bold #FF4DA6",  # pinky offending text
        } | getattr(__import__("__main__"), "__styles__", {})

        for fragment, style in ((_resolve_progname(progname), "prog-name"), (": ", ""), *fragments):
            output.append(fragment, styles.get(style) if colorful and style else None)


def integer(shortopts=None, longopts=None, datatype=None, mincount=0, maxcount=1, glossary=None, *, logger=None):
    """
    Build an Integer descriptor accepting between mincount and maxcount occurrences.
    """
    return Integer(shortopts, longopts, datatype, mincount, maxcount, glossary, logger=logger)


def optional_integer(shortopts=None, longopts=None, datatype=None, glossary=None, *, logger=None):
    """
    Build an Integer descriptor that may appear at most once.
    """
    return Integer(shortopts, longopts, datatype, 0, 1, glossary, logger=logger)


def required_integer(shortopts=None, longopts=None, datatype=None, glossary=None, *, logger=None):
    """
    Build an Integer descriptor that must appear exactly once.
    """
    return Integer(shortopts, longopts, datatype, 1, 1, glossary, logger=logger)


__all__ = (
    # Classes (descriptors)
    "Argument",
    "Integer",

    # Factories
    "integer",
    "optional_integer",
    "required_integer",
)

# Remove the internal metaclass from the module namespace to avoid accidental
# exposure in docs, autocompletion, or star-imports. Not part of the public API.
del ArgumentType
