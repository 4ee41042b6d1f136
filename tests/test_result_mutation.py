# tests/test_result_mutation.py

from result_object import Result


def test_fluent_chain_returns_same_instance():
    r = Result.fail()
    chained = r.set_code("error").set_message("m").add_error("e1")

    assert chained is r
    assert r.get_code() == "error"
    assert r.get_message() == "m"
    assert r.get_errors() == ["e1"]


def test_setters_never_flip_success():
    r = Result.success()
    r.set_code("failed").set_errors(["x"]).set_exception(RuntimeError("boom"))
    assert r.is_success()


def test_set_code_and_message_overwrite():
    r = Result.success("created", "first")
    r.set_code("updated").set_message("second")
    assert r.get_code() == "updated"
    assert r.get_message() == "second"


def test_extras_get_and_set():
    r = Result.success()
    r.set_extra("k", "v")
    assert r.get_extra("k") == "v"
    assert r.get_extra("missing") is False


def test_stored_false_extra_matches_missing_key():
    r = Result.success().set_extra("k", False)
    assert r.get_extra("k") is False
    assert r.get_extra("missing") is False
    assert r.has_extra("k") is True
    assert r.has_extra("missing") is False


def test_set_extra_overwrites_single_key():
    r = Result.success(extras={"a": 1, "b": 2})
    r.set_extra("a", 10)
    assert r.get_extras() == {"a": 10, "b": 2}


def test_set_extras_replaces_everything():
    r = Result.success(extras={"a": 1})
    r.set_extras({"b": 2})
    assert r.get_extras() == {"b": 2}
    assert r.get_extra("a") is False


def test_set_exception_round_trip_and_clear():
    cause = RuntimeError("db down")
    r = Result.fail().set_exception(cause)
    assert r.get_exception() is cause

    r.set_exception(None)
    assert r.get_exception() is None


def test_repr_mentions_status_and_code():
    text = repr(Result.fail("not_found", "No such user"))
    assert "success=False" in text
    assert "not_found" in text
