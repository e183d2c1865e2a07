from __future__ import annotations

import json

import pytest

from monadic import lift as L, map_then

from support import err_value, ok_value


class TestLift:
    def test_pure(self):
        assert ok_value(L.pure(3)) == 3

    def test_fail_never_maps(self):
        calls = []
        assert err_value(map_then(L.fail("nope"), calls.append)) == "nope"
        assert calls == []

    def test_optional_present(self):
        assert ok_value(L.optional("x", error=lambda: "missing")) == "x"

    def test_optional_none(self):
        assert err_value(L.optional(None, error=lambda: "missing")) == "missing"

    def test_optional_error_thunk_lazy(self):
        calls = []
        L.optional(0, error=lambda: calls.append("built"))
        assert calls == []

    def test_catching_ok(self):
        assert ok_value(L.catching(lambda: json.loads("[1]"), on_error=str)) == [1]

    def test_catching_error(self):
        error = err_value(L.catching(lambda: json.loads("{"), on_error=lambda e: type(e).__name__))
        assert error == "JSONDecodeError"

    @pytest.mark.asyncio
    async def test_catching_async(self):
        async def boom():
            raise RuntimeError("down")

        result = await L.catching_async(boom, on_error=str)
        assert err_value(result) == "down"

    @pytest.mark.asyncio
    async def test_catching_async_is_lazy(self):
        calls = []

        async def work():
            calls.append(1)
            return 1

        lazy = L.catching_async(work, on_error=str)
        assert calls == []
        assert ok_value(await lazy) == 1
