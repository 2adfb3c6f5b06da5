import pytest

from triton_tags.validators import GroupListError, validate_group_list


def test_valid_list_is_accepted():
    assert validate_group_list("foo-bar,bar_foo,disc") is None


def test_exactly_100_groups_is_accepted():
    assert validate_group_list(",".join(f"g{i}" for i in range(100))) is None


@pytest.mark.parametrize(
    "value, message",
    [
        ("", "no less than 1 character"),
        ("a" * 101, "no greater than 100 characters"),
        ("a,,b", "no less than 1 character"),
        ("&(--", "letters, numbers, _, and -"),
        ("ok,not ok", "letters, numbers, _, and -"),
        ("trailing\n", "letters, numbers, _, and -"),
        (",".join(str(i) for i in range(101)), "less than or equal to 100 group strings"),
        ("a,b,c,dupe,z,dupe,x", "contains duplicate group dupe"),
    ],
)
def test_invalid_lists(value, message):
    with pytest.raises(GroupListError) as excinfo:
        validate_group_list(value)
    assert message in str(excinfo.value)


def test_duplicates_are_case_sensitive():
    assert validate_group_list("Dupe,dupe") is None


def test_charset_wins_over_count():
    value = ",".join(["bad!"] + [str(i) for i in range(200)])
    with pytest.raises(ValueError, match="letters, numbers"):
        validate_group_list(value)


def test_name_length_wins_over_count():
    value = ",".join(["a" * 101] + [str(i) for i in range(100)])
    with pytest.raises(GroupListError, match="no greater than 100"):
        validate_group_list(value)


def test_name_length_wins_over_charset():
    with pytest.raises(GroupListError) as excinfo:
        validate_group_list("&" * 101)
    assert "no greater than 100 characters" in str(excinfo.value)
    assert "letters, numbers" not in str(excinfo.value)


def test_empty_name_wins_over_charset():
    with pytest.raises(GroupListError, match="no less than 1 character"):
        validate_group_list("bad!,,ok")


def test_name_length_wins_over_duplicates():
    with pytest.raises(ValueError, match="no greater than 100"):
        validate_group_list(",".join(["a", "a", "b" * 101]))
