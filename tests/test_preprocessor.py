import pytest

from buildcli.preprocessor import normalize_arguments


def test_empty_arguments_stay_empty():
    assert normalize_arguments([]) == []


def test_bundled_short_flags_are_split():
    assert normalize_arguments(["-vv"]) == ["-v", "-v"]
    assert normalize_arguments(["-vC", "dir"]) == ["-v", "-C", "dir"]


def test_short_flag_with_assignment_is_split_into_characters():
    assert normalize_arguments(["-k=dist"]) == ["-k", "-=", "-d", "-i", "-s", "-t"]


def test_single_short_flag_is_unchanged():
    assert normalize_arguments(["-v"]) == ["-v"]
    assert normalize_arguments(["-"]) == ["-"]


def test_assignment_is_split_at_first_separator():
    assert normalize_arguments(["--clean=dist"]) == ["--clean", "dist"]
    assert normalize_arguments(["--chdir=a=b"]) == ["--chdir", "a=b"]


def test_assignment_with_empty_side_is_unchanged():
    assert normalize_arguments(["--clean="]) == ["--clean="]
    assert normalize_arguments(["=dist"]) == ["=dist"]


def test_long_flags_are_not_split_into_characters():
    assert normalize_arguments(["--verbose", "--get"]) == ["--verbose", "--get"]


def test_pass_through_value_is_protected():
    args = ["-Xcc", "-I/usr/include", "-Xlinker", "-rpath=/opt/lib"]

    assert normalize_arguments(args) == args


def test_pass_through_protection_covers_only_next_argument():
    assert normalize_arguments(["-Xcc", "-DX=1", "-vv"]) == ["-Xcc", "-DX=1", "-v", "-v"]


def test_pass_through_switch_as_value_is_protected():
    # The second -Xcc is a value, so it does not protect the -vv after it
    assert normalize_arguments(["-Xcc", "-Xcc", "-vv"]) == ["-Xcc", "-Xcc", "-v", "-v"]


def test_order_is_preserved():
    args = ["-c", "release", "--clean=dist", "-vv", "name"]

    assert normalize_arguments(args) == ["-c", "release", "--clean", "dist", "-v", "-v", "name"]


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["--clean=dist"],
        ["-vv", "-C", "dir"],
        ["-Xcc", "-O2", "--configuration=release"],
        ["a=b=c", "--get"],
    ],
)
def test_normalized_length_never_shrinks(args):
    assert len(normalize_arguments(args)) >= len(args)


def test_split_assignments_rejoin_to_original():
    normalized = normalize_arguments(["--chdir=src=1"])

    assert "=".join(normalized) == "--chdir=src=1"


def test_split_short_flags_rejoin_to_original():
    normalized = normalize_arguments(["-vvC"])

    assert "-" + "".join(flag[1:] for flag in normalized) == "-vvC"
