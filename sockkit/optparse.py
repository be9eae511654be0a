"""A reentrant, getopt-like command line option parser.

Short options follow the getopt() option string syntax: a character alone
takes no argument, one following colon makes the argument required, two
make it optional. GNU-style long options are handled by ``next_long``.
Unless ``permute`` is off, non-option arguments are moved behind the
options as parsing proceeds.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

MSG_INVALID = "invalid option"
MSG_MISSING = "option requires an argument"
MSG_TOOMANY = "option takes no arguments"

_ERRMSG_SIZE = 64


class ArgType(IntEnum):
    """Whether an option takes an argument."""

    NONE = 0
    REQUIRED = 1
    OPTIONAL = 2


@dataclass(frozen=True)
class LongOption:
    """A long option, optionally paired with a one-character short form."""

    longname: Optional[str]
    shortname: Optional[str] = None
    argtype: ArgType = ArgType.NONE


class OptionError(ValueError):
    """An option was unknown, lacked its argument or had one too many."""

    def __init__(self, reason: str, option: str) -> None:
        self.reason = reason
        self.option = option
        prefix = f"{reason} -- '"
        room = max(0, _ERRMSG_SIZE - 2 - len(prefix))
        super().__init__(f"{prefix}{option[:room]}'")


def _is_dashdash(arg: Optional[str]) -> bool:
    return arg == "--"


def _is_shortopt(arg: Optional[str]) -> bool:
    return arg is not None and len(arg) >= 2 and arg[0] == "-" and arg[1] != "-"


def _is_longopt(arg: Optional[str]) -> bool:
    return arg is not None and len(arg) >= 3 and arg.startswith("--")


def _argtype(optstring: str, char: str) -> Optional[ArgType]:
    if char == ":":
        return None
    pos = optstring.find(char)
    if pos == -1:
        return None
    if optstring[pos + 1 : pos + 2] != ":":
        return ArgType.NONE
    if optstring[pos + 2 : pos + 3] == ":":
        return ArgType.OPTIONAL
    return ArgType.REQUIRED


def _optstring_from_long(longopts: Sequence[LongOption]) -> str:
    return "".join(
        opt.shortname + ":" * int(opt.argtype) for opt in longopts if opt.shortname
    )


def _long_matches(longname: Optional[str], option: str) -> bool:
    if longname is None:
        return False
    return option.split("=", 1)[0] == longname


def _long_argument(option: str) -> Optional[str]:
    _, sep, value = option.partition("=")
    return value if sep else None


class OptParser:
    """Parser state over one argument vector.

    ``argv[0]`` is the program name and is never parsed. After each call
    ``optarg`` holds the option's argument (or None) and ``optopt`` the
    short option character (or None).
    """

    def __init__(self, argv: Sequence[str], permute: bool = True) -> None:
        self.argv: list[str] = list(argv)
        self.permute = permute
        self.optind = 1
        self.optopt: Optional[str] = None
        self.optarg: Optional[str] = None
        self.errmsg = ""
        self.subopt = 0

    def _at(self, index: int) -> Optional[str]:
        return self.argv[index] if index < len(self.argv) else None

    def _fail(self, reason: str, option: str) -> OptionError:
        error = OptionError(reason, option)
        self.errmsg = str(error)
        return error

    def _move_behind(self, index: int) -> None:
        nonoption = self.argv.pop(index)
        self.argv.insert(self.optind - 1, nonoption)

    def next(self, optstring: str) -> Optional[str]:
        """Return the next short option character, or None when done.

        Raises OptionError for an unknown option or a missing argument.
        """
        option = self._at(self.optind)
        self.errmsg = ""
        self.optopt = None
        self.optarg = None
        if option is None:
            return None
        if _is_dashdash(option):
            self.optind += 1
            return None
        if not _is_shortopt(option):
            if not self.permute:
                return None
            index = self.optind
            self.optind += 1
            try:
                return self.next(optstring)
            finally:
                self._move_behind(index)
                self.optind -= 1

        rest = option[self.subopt + 1 :]
        char = rest[0]
        self.optopt = char
        kind = _argtype(optstring, char)
        following = self._at(self.optind + 1)

        if kind is None:
            self.subopt = 0
            self.optind += 1
            raise self._fail(MSG_INVALID, char)
        if kind is ArgType.NONE:
            if len(rest) > 1:
                self.subopt += 1
            else:
                self.subopt = 0
                self.optind += 1
            return char

        self.subopt = 0
        self.optind += 1
        if len(rest) > 1:
            self.optarg = rest[1:]
        elif kind is ArgType.REQUIRED:
            if following is None:
                raise self._fail(MSG_MISSING, char)
            self.optarg = following
            self.optind += 1
        return char

    def arg(self) -> Optional[str]:
        """Step over and return the next argument, or None at the end."""
        option = self._at(self.optind)
        self.subopt = 0
        if option is not None:
            self.optind += 1
        return option

    def _long_fallback(self, longopts: Sequence[LongOption]) -> Optional[LongOption]:
        char = self.next(_optstring_from_long(longopts))
        if char is None:
            return None
        matches = [opt for opt in longopts if opt.shortname == char]
        return matches[-1] if matches else None

    def next_long(self, longopts: Sequence[LongOption]) -> Optional[LongOption]:
        """Return the next matched option, or None when done.

        Short options are matched against the short names in ``longopts``.
        Raises OptionError for an unknown option, a missing argument or an
        argument given to an option that takes none.
        """
        option = self._at(self.optind)
        if option is None:
            return None
        if _is_dashdash(option):
            self.optind += 1
            return None
        if _is_shortopt(option):
            return self._long_fallback(longopts)
        if not _is_longopt(option):
            if not self.permute:
                return None
            index = self.optind
            self.optind += 1
            try:
                return self.next_long(longopts)
            finally:
                self._move_behind(index)
                self.optind -= 1

        self.errmsg = ""
        self.optopt = None
        self.optarg = None
        body = option[2:]
        self.optind += 1
        for opt in longopts:
            if not _long_matches(opt.longname, body):
                continue
            self.optopt = opt.shortname
            value = _long_argument(body)
            name = opt.longname or ""
            if opt.argtype is ArgType.NONE and value is not None:
                raise self._fail(MSG_TOOMANY, name)
            if value is not None:
                self.optarg = value
            elif opt.argtype is ArgType.REQUIRED:
                self.optarg = self._at(self.optind)
                if self.optarg is None:
                    raise self._fail(MSG_MISSING, name)
                self.optind += 1
            return opt
        raise self._fail(MSG_INVALID, body)