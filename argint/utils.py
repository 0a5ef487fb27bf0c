"""
Argint utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the arguments and faults layers.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/"".

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated accessors for clean tracebacks.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr).

- progname(name)
  • Program name for diagnostics (explicit name, __main__.__prog__, or argv[0]).

- syntax(shortopts, longopts, datatype)
  • Canonical option spelling used by diagnostics, e.g. "-n|--number=<int>".

Stability and contract
- These utilities are re-exported via __all__.
- Names not in __all__ are internal and may change without notice.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> syntax("n", ("number",), "<int>")
    '-n|--number=<int>'
"""
import builtins
import functools
import os.path
import sys
from collections.abc import Sequence, Mapping, Set
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and a singleton per process.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in isinstance checks (e.g., str | Unset).
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0 or "" are preserved as-is; only Unset is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable
    - rename(name) -> decorator
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _freeze(object):
    """
    Shallow read-only snapshot of a backing container.

    - Sequence (non-string) → tuple
    - Mapping → dict copy
    - Set → frozenset
    - Anything else → returned as-is
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(object)
    elif isinstance(object, Mapping):
        return dict(object)
    elif isinstance(object, Set):
        return frozenset(object)
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The generated property reads "_{name}" on the instance and returns a
    frozen snapshot for container types, so callers cannot mutate descriptor
    state through the public API.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _freeze(getattr(self, "_" + name))

    return property(getter)


def syntax(shortopts, longopts, datatype=None, /, separator="|"):
    """
    Render the canonical spelling of an option for diagnostics and usage.

    Layout
    - each short option as "-c", joined by the separator;
    - the separator again between the short and the long group (when both exist);
    - each long option as "--name", joined by the separator;
    - when datatype is not None: "=" if there is a long option, otherwise a single
      space if there is a short option, followed by the datatype itself.

    Parameters
    - shortopts: Iterable[str] of single characters (a plain string works too).
    - longopts: Iterable[str] of long names without the leading dashes.
    - datatype: str | None, the value placeholder (or the offending text).
    - separator: str placed between alternative spellings.

    Examples
    - syntax("n", ["number"], "<int>")   -> "-n|--number=<int>"
    - syntax("nN", [], "<int>")          -> "-n|-N <int>"
    - syntax("", ["num", "number"])      -> "--num|--number"
    """
    shorts = separator.join("-" + option for option in shortopts)
    longs = separator.join("--" + option for option in longopts)

    text = separator.join(filter(None, (shorts, longs)))
    if datatype is not None:
        if longs:
            text += "=" + datatype
        elif shorts:
            text += " " + datatype
        else:
            text += datatype
    return text


def progname(name=None, /):
    """
    Resolve the program name shown at the start of diagnostics.

    Lookup order
    - the given name, when truthy;
    - __main__.__prog__, when the host application defines it;
    - the basename of sys.argv[0];
    - an empty string.
    """
    if name:
        return name
    if prog := getattr(__import__("__main__"), "__prog__", None):
        return prog
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Use Unset as a default when None is a valid, user-meaningful value but you still
need to distinguish “no input” from “explicitly passed None”.
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",
    "syntax",
    "progname",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
