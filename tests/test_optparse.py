import pytest
from hypothesis import given
from hypothesis import strategies as st

from sockkit.optparse import ArgType, LongOption, OptionError, OptParser

LONGOPTS = [
    LongOption("verbose", "v", ArgType.NONE),
    LongOption("output", "o", ArgType.REQUIRED),
    LongOption("color", "c", ArgType.OPTIONAL),
    LongOption("flag", None, ArgType.NONE),
]


def collect(parser, optstring):
    found = []
    while (char := parser.next(optstring)) is not None:
        found.append((char, parser.optarg))
    return found


def rest(parser):
    remaining = []
    while (item := parser.arg()) is not None:
        remaining.append(item)
    return remaining


def test_separate_flags():
    parser = OptParser(["prog", "-a", "-b"])
    assert collect(parser, "ab") == [("a", None), ("b", None)]
    assert parser.optind == 3


def test_clustered_flags():
    parser = OptParser(["prog", "-ab"])
    assert parser.next("ab") == "a"
    assert parser.optind == 1
    assert parser.next("ab") == "b"
    assert parser.optind == 2
    assert parser.next("ab") is None


def test_required_argument_attached_and_separate():
    parser = OptParser(["prog", "-ofile", "-o", "other"])
    assert collect(parser, "o:") == [("o", "file"), ("o", "other")]


def test_required_argument_missing():
    parser = OptParser(["prog", "-o"])
    with pytest.raises(OptionError) as info:
        parser.next("o:")
    assert str(info.value) == "option requires an argument -- 'o'"
    assert parser.errmsg == str(info.value)
    assert parser.optarg is None


def test_invalid_option():
    parser = OptParser(["prog", "-x", "-a"])
    with pytest.raises(OptionError) as info:
        parser.next("a")
    assert str(info.value) == "invalid option -- 'x'"
    assert info.value.option == "x"
    assert parser.next("a") == "a"


def test_colon_is_never_an_option():
    parser = OptParser(["prog", "-:"])
    with pytest.raises(OptionError) as info:
        parser.next("a:")
    assert info.value.reason == "invalid option"


def test_optional_argument_not_taken_from_next_word():
    parser = OptParser(["prog", "-o", "word", "-ovalue"], permute=False)
    assert parser.next("o::") == "o"
    assert parser.optarg is None
    assert parser.next("o::") is None
    assert parser.arg() == "word"
    assert parser.next("o::") == "o"
    assert parser.optarg == "value"


def test_dashdash_stops_parsing():
    parser = OptParser(["prog", "-a", "--", "-b"])
    assert collect(parser, "ab") == [("a", None)]
    assert rest(parser) == ["-b"]


def test_permute_moves_nonoptions_behind():
    parser = OptParser(["prog", "file", "-a", "other"])
    assert collect(parser, "a") == [("a", None)]
    assert parser.argv == ["prog", "-a", "file", "other"]
    assert rest(parser) == ["file", "other"]


def test_no_permute_stops_at_nonoption():
    parser = OptParser(["prog", "file", "-a"], permute=False)
    assert parser.next("a") is None
    assert parser.optind == 1
    assert rest(parser) == ["file", "-a"]


def test_lone_dash_is_an_argument():
    parser = OptParser(["prog", "-", "-a"])
    assert collect(parser, "a") == [("a", None)]
    assert rest(parser) == ["-"]


@given(st.lists(st.sampled_from(["-a", "-b", "x", "y", "z"]), max_size=12))
def test_permutation_keeps_order(tokens):
    parser = OptParser(["prog", *tokens])
    options = [char for char, _ in collect(parser, "ab")]
    assert options == [t[1] for t in tokens if t.startswith("-")]
    assert rest(parser) == [t for t in tokens if not t.startswith("-")]


def test_long_flag():
    parser = OptParser(["prog", "--verbose"])
    assert parser.next_long(LONGOPTS) == LONGOPTS[0]
    assert parser.optopt == "v"
    assert parser.next_long(LONGOPTS) is None


def test_long_required_with_equals_and_separate():
    parser = OptParser(["prog", "--output=a.txt", "--output", "b.txt"])
    assert parser.next_long(LONGOPTS) == LONGOPTS[1]
    assert parser.optarg == "a.txt"
    assert parser.next_long(LONGOPTS) == LONGOPTS[1]
    assert parser.optarg == "b.txt"
    assert parser.next_long(LONGOPTS) is None


def test_long_required_missing():
    parser = OptParser(["prog", "--output"])
    with pytest.raises(OptionError) as info:
        parser.next_long(LONGOPTS)
    assert str(info.value) == "option requires an argument -- 'output'"


def test_long_optional():
    parser = OptParser(["prog", "--color", "--color=red"])
    assert parser.next_long(LONGOPTS) == LONGOPTS[2]
    assert parser.optarg is None
    assert parser.next_long(LONGOPTS) == LONGOPTS[2]
    assert parser.optarg == "red"


def test_long_flag_with_argument_is_error():
    parser = OptParser(["prog", "--verbose=yes"])
    with pytest.raises(OptionError) as info:
        parser.next_long(LONGOPTS)
    assert str(info.value) == "option takes no arguments -- 'verbose'"


def test_long_unknown():
    parser = OptParser(["prog", "--nope"])
    with pytest.raises(OptionError) as info:
        parser.next_long(LONGOPTS)
    assert str(info.value) == "invalid option -- 'nope'"
    assert parser.optind == 2


def test_long_prefix_does_not_match():
    parser = OptParser(["prog", "--verb"])
    with pytest.raises(OptionError):
        parser.next_long(LONGOPTS)


def test_long_without_short_name():
    parser = OptParser(["prog", "--flag"])
    assert parser.next_long(LONGOPTS) == LONGOPTS[3]
    assert parser.optopt is None


def test_short_fallback_in_long_mode():
    parser = OptParser(["prog", "-v", "-ofile", "-c"])
    assert parser.next_long(LONGOPTS) == LONGOPTS[0]
    assert parser.next_long(LONGOPTS) == LONGOPTS[1]
    assert parser.optarg == "file"
    assert parser.next_long(LONGOPTS) == LONGOPTS[2]
    assert parser.optarg is None


def test_short_fallback_unknown():
    parser = OptParser(["prog", "-z"])
    with pytest.raises(OptionError) as info:
        parser.next_long(LONGOPTS)
    assert str(info.value) == "invalid option -- 'z'"


def test_long_permute():
    parser = OptParser(["prog", "input", "--verbose", "more"])
    assert parser.next_long(LONGOPTS) == LONGOPTS[0]
    assert parser.next_long(LONGOPTS) is None
    assert rest(parser) == ["input", "more"]


def test_long_dashdash():
    parser = OptParser(["prog", "--", "--verbose"])
    assert parser.next_long(LONGOPTS) is None
    assert rest(parser) == ["--verbose"]


def test_error_message_is_truncated():
    name = "x" * 200
    parser = OptParser(["prog", "--" + name])
    with pytest.raises(OptionError) as info:
        parser.next_long(LONGOPTS)
    message = str(info.value)
    assert message.startswith("invalid option -- 'x")
    assert message.endswith("'")
    assert len(message) < 64
    assert info.value.option == name


def test_arg_steps_over_subcommand():
    parser = OptParser(["prog", "-a", "sub", "-b"], permute=False)
    assert parser.next("a") == "a"
    assert parser.next("a") is None
    assert parser.arg() == "sub"
    assert parser.next("b") == "b"
    assert parser.arg() is None
    assert parser.optind == 4