"""Unit tests for the Result monad."""

from __future__ import annotations

import pytest

from es_commons.kernel.types import Err, Ok


class TestResultMonad:
    def test_ok_value(self) -> None:
        ok = Ok(42)
        assert ok.value == 42
        assert ok.unwrap() == 42

    def test_ok_flags(self) -> None:
        assert Ok(1).is_ok()
        assert not Ok(1).is_err()

    def test_err_unwrap_raises(self) -> None:
        err = Err(ValueError("boom"))
        with pytest.raises(ValueError, match="boom"):
            err.unwrap()

    def test_err_flags(self) -> None:
        assert Err(ValueError()).is_err()
        assert not Err(ValueError()).is_ok()

    def test_unwrap_or(self) -> None:
        assert Ok(1).unwrap_or(2) == 1
        assert Err(ValueError()).unwrap_or(2) == 2

    def test_map(self) -> None:
        assert Ok(2).map(lambda x: x * 3) == Ok(6)
        err = Err(ValueError())
        assert err.map(lambda x: x) is err
