import pytest

from pixelframe.errors import ErrorCode, MlxError, strerror


def test_success_message():
    assert strerror(ErrorCode.SUCCESS) == "No Errors"


def test_string_too_big_message():
    assert strerror(ErrorCode.STRTOOBIG) == "String is too big to be drawn"


def test_plain_int_is_accepted():
    assert strerror(int(ErrorCode.MEMFAIL)) == "Failed to allocate memory"


def test_every_code_has_distinct_message():
    messages = [strerror(code) for code in ErrorCode]
    assert len(set(messages)) == len(ErrorCode)
    assert all(messages)


@pytest.mark.parametrize("code", [-1, len(ErrorCode), 1000])
def test_out_of_range_code_raises(code):
    with pytest.raises(ValueError):
        strerror(code)


def test_exception_carries_code_and_message():
    err = MlxError(ErrorCode.INVDIM)
    assert err.code is ErrorCode.INVDIM
    assert str(err) == strerror(ErrorCode.INVDIM)


def test_exception_from_int_code():
    err = MlxError(int(ErrorCode.INVXPM))
    assert err.code is ErrorCode.INVXPM


def test_exception_with_bad_code_raises_value_error():
    with pytest.raises(ValueError):
        MlxError(99)