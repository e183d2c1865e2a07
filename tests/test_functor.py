from __future__ import annotations

import pytest
from kungfu import Error, Ok

from monadic import NotMappableError, Writer, fmap, register, replace, replaceM
from monadic.writer import Log

from support import Box, Pair, err_value, ok_value


@register(Box)
def _map_box(m, f):
    return Box(f(m.item))


class TestFmapBuiltins:
    """fmap over builtin containers"""

    def test_list(self):
        assert fmap(lambda x: x * 2, [1, 2, 3]) == [2, 4, 6]

    def test_list_not_mutated(self):
        xs = [1, 2, 3]
        ys = fmap(str, xs)
        assert xs == [1, 2, 3]
        assert ys is not xs

    def test_tuple(self):
        assert fmap(len, ("ab", "c")) == (2, 1)

    def test_set_and_frozenset(self):
        assert fmap(abs, {-1, 1, 2}) == {1, 2}
        result = fmap(abs, frozenset({-3}))
        assert result == frozenset({3})
        assert isinstance(result, frozenset)

    def test_dict_maps_values_keeps_keys(self):
        assert fmap(str.upper, {"a": "x", "b": "y"}) == {"a": "X", "b": "Y"}

    def test_empty_containers(self):
        assert fmap(str, []) == []
        assert fmap(str, {}) == {}

    def test_iterator_is_lazy(self):
        seen = []

        def record(x):
            seen.append(x)
            return x + 1

        mapped = fmap(record, iter([1, 2]))
        assert seen == []
        assert list(mapped) == [2, 3]
        assert seen == [1, 2]

    def test_generator(self):
        gen = (n for n in range(3))
        assert list(fmap(lambda n: n * n, gen)) == [0, 1, 4]

    def test_callable_composes_after(self):
        add_one = lambda x: x + 1
        mapped = fmap(str, add_one)
        assert mapped(41) == "42"

    def test_callable_forwards_all_arguments(self):
        mapped = fmap(len, lambda a, sep=",": sep.join(a))
        assert mapped(["ab", "c"], sep="--") == 5

    @pytest.mark.asyncio
    async def test_coroutine(self):
        async def fetch():
            return 20

        assert await fmap(lambda x: x + 1, fetch()) == 21

    @pytest.mark.asyncio
    async def test_coroutine_failure_surfaces_on_await(self):
        async def broken():
            raise KeyError("missing")

        mapped = fmap(str, broken())
        with pytest.raises(KeyError):
            await mapped


class TestFmapMappable:
    """fmap delegates to .map when the context has one"""

    def test_ok(self):
        assert ok_value(fmap(lambda n: n + 1, Ok(1))) == 2

    def test_error_skips_function(self):
        calls = []
        result = fmap(calls.append, Error("boom"))
        assert err_value(result) == "boom"
        assert calls == []

    def test_writer_keeps_log(self):
        w = Writer(2, Log.of("start"))
        assert fmap(str, w) == Writer("2", Log.of("start"))

    def test_user_type(self):
        assert fmap(lambda x: x * 10, Pair("id", 4)) == Pair("id", 40)


class TestRegister:
    """Registered instances for types without map"""

    def test_registered_type(self):
        assert fmap(lambda x: x + 1, Box(1)) == Box(2)

    def test_registered_type_with_replace(self):
        assert replace("z", Box(1)) == Box("z")


class TestNotMappable:
    @pytest.mark.parametrize("value", ["abc", 5, None, 1.5])
    def test_rejects_plain_values(self, value):
        with pytest.raises(NotMappableError) as info:
            fmap(str, value)
        assert info.value.type is type(value)

    def test_is_type_error(self):
        with pytest.raises(TypeError):
            fmap(str, 5)


class TestReplace:
    """replace (<$) keeps shape and effect"""

    def test_list(self):
        assert replace("z", [1, 2, 3]) == ["z", "z", "z"]

    def test_error_untouched(self):
        assert err_value(replace(0, Error("boom"))) == "boom"

    def test_ok(self):
        assert ok_value(replace("done", Ok(1))) == "done"

    def test_writer_log_preserved(self):
        w = Writer(1, Log.of("a", "b"))
        assert replace(None, w) == Writer(None, Log.of("a", "b"))

    def test_explicit_fmap(self):
        second = lambda f, p: (p[0], f(p[1]))
        assert replaceM("x", ("tag", 1), fmap=second) == ("tag", "x")
