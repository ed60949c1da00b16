import pytest

from shkit.environment import Environment, EnvVar, parse_entry


def test_parse_entry_with_value():
    var = parse_entry("PATH=/usr/bin")
    assert var == EnvVar(content="PATH=/usr/bin", key="PATH", value="/usr/bin")


def test_parse_entry_splits_at_first_equals():
    var = parse_entry("A=b=c")
    assert var.key == "A"
    assert var.value == "b=c"


def test_parse_entry_without_equals_has_no_value():
    var = parse_entry("OLDPWD")
    assert var.key == "OLDPWD"
    assert var.value is None


def test_parse_entry_empty_value_differs_from_missing():
    var = parse_entry("EMPTY=")
    assert var.value == ""
    assert var.key == "EMPTY"


def test_parse_entry_rejects_non_string():
    with pytest.raises(TypeError):
        parse_entry(None)


@pytest.mark.parametrize("entry", ["X=1", "Y", "Z=", "K=v=w", "=odd"])
def test_parse_entry_round_trip(entry):
    var = parse_entry(entry)
    rebuilt = var.key if var.value is None else f"{var.key}={var.value}"
    assert rebuilt == entry == var.content


def test_init_keeps_order_and_envp():
    entries = ["HOME=/home/u", "PWD=/tmp", "SHLVL=1"]
    env = Environment(entries)
    assert env.envp() == entries
    assert len(env) == 3


def test_add_appends_at_end():
    env = Environment(["B=2"])
    env.add("A=1")
    assert [var.key for var in env] == ["B", "A"]


def test_get_returns_first_match_or_none():
    env = Environment(["K=first", "K=second"])
    assert env.get("K").value == "first"
    assert env.get("MISSING") is None


def test_remove_returns_removed_entry():
    env = Environment(["A=1", "B=2", "A=3"])
    removed = env.remove("A")
    assert removed.content == "A=1"
    assert env.envp() == ["B=2", "A=3"]


def test_remove_missing_is_noop():
    env = Environment(["A=1"])
    assert env.remove("NOPE") is None
    assert env.envp() == ["A=1"]


def test_sort_orders_by_key():
    env = Environment(["PWD=/x", "HOME=/h", "OLDPWD", "A_B=1"])
    env.sort()
    keys = [var.key for var in env]
    assert keys == sorted(keys)
    assert len(env) == 4


def test_sort_is_stable_for_equal_keys():
    env = Environment(["K=2", "A=0", "K=1"])
    env.sort()
    assert env.envp() == ["A=0", "K=2", "K=1"]


def test_envp_includes_entries_without_value():
    env = Environment(["OLDPWD", "X=1"])
    assert env.envp() == ["OLDPWD", "X=1"]


def test_iteration_is_snapshot():
    env = Environment(["A=1", "B=2"])
    seen = []
    for var in env:
        seen.append(var.key)
        env.remove(var.key)
    assert seen == ["A", "B"]
    assert len(env) == 0


def test_empty_environment():
    env = Environment()
    assert len(env) == 0
    assert env.envp() == []