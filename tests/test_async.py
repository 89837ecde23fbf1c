"""Tests for the async layer: AsyncResult, AsyncOption and lift."""

import asyncio

import pytest
from hypothesis import given

from switchyard import (
    ArgumentError,
    AsyncOption,
    AsyncResult,
    Fail,
    Nothing,
    Ok,
    Some,
    Unit,
    fail_with,
    lift,
    settle_error,
    settle_option,
    settle_result,
)
from tests.strategies import options, results


async def double(x):
    await asyncio.sleep(0)
    return x * 2


async def returning(value):
    return value


class TestAsyncResultCreation:
    """Tests for AsyncResult construction and awaiting."""

    @pytest.mark.asyncio
    async def test_await_wrapped_coroutine(self):
        """Awaiting an AsyncResult yields the wrapped Result."""
        assert await AsyncResult(returning(Ok(42))) == Ok(42)

    @pytest.mark.asyncio
    async def test_from_constructors(self):
        """from_ok / from_fail / from_result build resolved results."""
        assert await AsyncResult.from_ok(1) == Ok(1)
        assert await AsyncResult.from_fail('e') == Fail('e')
        assert await AsyncResult.from_result(fail_with('x')) == fail_with('x')


class TestAsyncResultChaining:
    """Tests for AsyncResult chaining methods."""

    @pytest.mark.asyncio
    async def test_map_and_map_async(self):
        """map and map_async transform the Ok value."""
        assert await AsyncResult.from_ok(5).map(lambda x: x + 1) == Ok(6)
        assert await AsyncResult.from_ok(5).map_async(double) == Ok(10)
        assert await AsyncResult.from_fail('e').map_async(double) == Fail('e')

    @pytest.mark.asyncio
    async def test_bind_and_bind_async(self):
        """bind / bind_async chain fallible steps; a Fail skips them."""

        async def validate(x):
            return Ok(x) if x > 0 else fail_with('not positive')

        assert await AsyncResult.from_ok(3).bind(lambda x: Ok(x * 3)) == Ok(9)
        assert await AsyncResult.from_ok(-1).bind_async(validate) == fail_with('not positive')
        assert await AsyncResult.from_fail(('first',)).bind_async(validate) == Fail(('first',))

    @pytest.mark.asyncio
    async def test_error_channel(self):
        """map2 / map_error / map_error_async transform the error."""
        assert await AsyncResult.from_fail('boom').map2(str, len) == Fail(4)
        assert await AsyncResult.from_fail('boom').map_error(str.upper) == Fail('BOOM')
        assert await AsyncResult.from_fail(2).map_error_async(double) == Fail(4)
        assert await AsyncResult.from_ok(1).map_error_async(double) == Ok(1)
        assert await AsyncResult.from_ok(2).map2_async(double, double) == Ok(4)

    @pytest.mark.asyncio
    async def test_tee_forms(self):
        """tee / tee_async / tee_error / tee_error_async run side effects."""
        seen = []

        async def record(value):
            seen.append(value)

        assert await AsyncResult.from_ok(1).tee(seen.append).tee_async(record) == Ok(1)
        assert await AsyncResult.from_fail('e').tee_error(seen.append).tee_error_async(record) == Fail('e')
        assert seen == [1, 1, 'e', 'e']

    @pytest.mark.asyncio
    async def test_flatten_map_to_and_to_void(self):
        """flatten, map_to and to_void mirror the sync methods."""
        assert await AsyncResult.from_ok(Ok(1)).flatten() == Ok(1)
        assert await AsyncResult.from_ok(Unit).map_to('id') == Ok('id')
        assert await AsyncResult.from_ok(3).to_void() == Ok(Unit)

    @pytest.mark.asyncio
    async def test_map_to_async(self):
        """map_to_async replaces the Ok value with an awaited one."""
        assert await AsyncResult.from_ok(Unit).map_to_async(returning('id')) == Ok('id')
        assert await AsyncResult.from_fail('e').map_to_async(returning('id')) == Fail('e')

    @pytest.mark.asyncio
    async def test_plus(self):
        """plus accepts a Result or an awaitable and merges errors."""
        assert await AsyncResult.from_ok(1).plus(Ok(2)) == Ok((1, 2))
        assert await AsyncResult.from_fail(('a',)).plus(AsyncResult.from_fail(('b',))) == Fail(('a', 'b'))
        assert await AsyncResult.from_ok(1).plus_with(returning(Ok(2)), lambda a, b: a + b) == Ok(3)

    @pytest.mark.asyncio
    async def test_plus_awaits_left_first(self):
        """The receiver is awaited before the other operand."""
        order = []

        async def deferred(name, result):
            order.append(name)
            return result

        await AsyncResult(deferred('left', Ok(1))).plus(deferred('right', Ok(2)))
        assert order == ['left', 'right']


class TestAsyncResultTerminal:
    """Tests for AsyncResult terminal methods."""

    @pytest.mark.asyncio
    async def test_match_sync_and_async_handlers(self):
        """match accepts sync or async handlers."""
        assert await AsyncResult.from_ok(2).match(lambda x: x + 1, len) == 3
        assert await AsyncResult.from_ok(2).match(double, len) == 4
        assert await AsyncResult.from_fail('ab').match(double, len) == 2

    @pytest.mark.asyncio
    async def test_switch(self):
        """switch runs one handler and resolves to None."""
        seen = []

        async def on_fail(error):
            seen.append(error)

        assert await AsyncResult.from_fail('e').switch(seen.append, on_fail) is None
        assert seen == ['e']

    @pytest.mark.asyncio
    async def test_unwrap_and_to_option(self):
        """unwrap_or / unwrap_or_else / to_option resolve to plain values."""
        assert await AsyncResult.from_fail('e').unwrap_or(0) == 0
        assert await AsyncResult.from_fail('boom').unwrap_or_else(len) == 4
        assert await AsyncResult.from_ok(1).to_option() == Some(1)
        assert await AsyncResult.from_fail('e').to_option() is Nothing


class TestAsyncOption:
    """Tests for AsyncOption."""

    @pytest.mark.asyncio
    async def test_constructors(self):
        """Constructors build resolved options."""
        assert await AsyncOption.from_some(1) == Some(1)
        assert await AsyncOption.from_option(Nothing) is Nothing
        assert await AsyncOption.nothing() is Nothing
        assert await AsyncOption.from_awaitable(returning(None)) == Some(None)
        assert await AsyncOption.to_option(returning(None)) is Nothing
        assert await AsyncOption.to_option(returning(3)) == Some(3)

    @pytest.mark.asyncio
    async def test_chaining(self):
        """bind / map / tee / flatten mirror the sync methods."""
        seen = []

        async def find(x):
            return Some(x) if x > 5 else Nothing

        assert await AsyncOption.from_some(5).map_async(double).bind_async(find).tee(seen.append) == Some(10)
        assert await AsyncOption.from_some(1).bind(lambda x: Nothing).map(str) is Nothing
        assert await AsyncOption.from_some(Some(2)).flatten() == Some(2)
        assert seen == [10]

    @pytest.mark.asyncio
    async def test_fallbacks(self):
        """or_ / or_else / or_else_async supply a replacement for Nothing."""

        async def fallback():
            return Some('async')

        assert await AsyncOption.nothing().or_(Some('x')) == Some('x')
        assert await AsyncOption.nothing().or_else(lambda: Some('y')) == Some('y')
        assert await AsyncOption.nothing().or_else_async(fallback) == Some('async')
        assert await AsyncOption.from_some(1).or_else_async(fallback) == Some(1)

    @pytest.mark.asyncio
    async def test_or_accepts_awaitable(self):
        """or_ takes an awaitable Option, awaited after the receiver."""
        order = []

        async def deferred(name, option):
            order.append(name)
            return option

        assert await AsyncOption(deferred('left', Nothing)).or_(deferred('right', Some('x'))) == Some('x')
        assert order == ['left', 'right']
        assert await AsyncOption.from_some(1).or_(returning(Some(2))) == Some(1)
        assert await AsyncOption.nothing().or_(AsyncOption.from_some(3)) == Some(3)

    @pytest.mark.asyncio
    async def test_terminals(self):
        """Terminal methods resolve to plain values."""

        async def zero():
            return 0

        async def add(acc, value):
            return acc + value

        assert await AsyncOption.from_some(2).match(double, lambda: 0) == 4
        assert await AsyncOption.from_some(2).fold(1, lambda acc, x: acc + x) == 3
        assert await AsyncOption.nothing().fold_async(1, add) == 1
        assert await AsyncOption.from_some(2).fold_until(1, lambda acc, x: Nothing) is Nothing
        assert await AsyncOption.nothing().fold_until_async(1, add) == Some(1)
        assert await AsyncOption.nothing().unwrap_or(7) == 7
        assert await AsyncOption.nothing().unwrap_or_else(lambda: 8) == 8
        assert await AsyncOption.nothing().unwrap_or_else_async(zero) == 0
        assert await AsyncOption.from_some(5).unwrap_or_else_async(zero) == 5
        assert await AsyncOption.nothing().to_result('missing') == Fail('missing')

    @pytest.mark.asyncio
    async def test_unwrap_or_keeps_awaitable_values(self):
        """A value that happens to be awaitable is returned, not awaited."""
        pending = asyncio.get_running_loop().create_future()
        pending.set_result('inner')
        assert await AsyncOption.from_some(pending).unwrap_or(None) is pending


class TestEagerArgumentChecks:
    """Deferred forms validate arguments when called, not when awaited."""

    def test_async_result_methods(self):
        """AsyncResult rejects missing functions immediately."""
        deferred = AsyncResult(None)  # type: ignore[arg-type]
        for call in (
            lambda: deferred.map(None),
            lambda: deferred.bind_async(None),
            lambda: deferred.map_error(None),
            lambda: deferred.tee_error_async(None),
            lambda: deferred.plus(Ok(1), 'merge'),
            lambda: deferred.match(str, None),
        ):
            with pytest.raises(ArgumentError):
                call()

    def test_async_option_methods(self):
        """AsyncOption rejects missing functions immediately."""
        deferred = AsyncOption(None)  # type: ignore[arg-type]
        for call in (
            lambda: deferred.map(None),
            lambda: deferred.or_else_async(None),
            lambda: deferred.fold(0, None),
            lambda: deferred.unwrap_or_else_async(None),
        ):
            with pytest.raises(ArgumentError):
                call()


class TestLift:
    """Tests for lift and the settle helpers."""

    @pytest.mark.asyncio
    async def test_lift_sync_step(self):
        """A lifted sync step runs once the container is available."""
        lifted = lift(lambda result: result.map(lambda x: x + 1))
        assert await lifted(returning(Ok(1))) == Ok(2)

    @pytest.mark.asyncio
    async def test_lift_async_step(self):
        """A step returning an awaitable is awaited."""
        lifted = lift(lambda result: result.map_async(double))
        assert await lifted(returning(Ok(3))) == Ok(6)

    @pytest.mark.asyncio
    async def test_settle_helpers(self):
        """settle_* await the payload inside a container."""
        assert await settle_option(Some(returning(1))) == Some(1)
        assert await settle_option(Nothing) is Nothing
        assert await settle_result(Ok(returning(2))) == Ok(2)
        assert await settle_result(Fail('e')) == Fail('e')
        assert await settle_error(Fail(returning('e'))) == Fail('e')
        assert await settle_error(Ok(1)) == Ok(1)


class TestSyncAsyncEquivalence:
    """Every async form agrees with its sync counterpart."""

    @given(results)
    def test_result_chain(self, result):
        """A mixed chain gives the same result either way."""

        def validate(x):
            return Ok(x) if x % 3 else fail_with('multiple of three')

        async def validate_async(x):
            return validate(x)

        sync = result.map(abs).bind(validate).map_error(lambda errors: (*errors, 'wrapped'))

        async def run():
            return await (
                AsyncResult.from_result(result)
                .map_async(returning_abs)
                .bind_async(validate_async)
                .map_error(lambda errors: (*errors, 'wrapped'))
            )

        assert asyncio.run(run()) == sync

    @given(options)
    def test_option_chain(self, option):
        """map / bind / fold agree for AsyncOption."""
        sync = option.map(abs).bind(lambda x: Some(x) if x % 2 else Nothing).fold(1, lambda acc, x: acc + x)

        async def run():
            return await (
                AsyncOption.from_option(option)
                .map_async(returning_abs)
                .bind(lambda x: Some(x) if x % 2 else Nothing)
                .fold(1, lambda acc, x: acc + x)
            )

        assert asyncio.run(run()) == sync

    @given(results, results)
    def test_plus(self, left, right):
        """AsyncResult.plus agrees with Result.plus."""

        async def run():
            return await AsyncResult.from_result(left).plus(returning(right))

        assert asyncio.run(run()) == left.plus(right)


async def returning_abs(x):
    return abs(x)


class TestSwitchIsLazy:
    """switch checks its handlers at once but builds nothing until awaited."""

    @pytest.mark.asyncio
    async def test_async_result_switch(self, monkeypatch):
        matched = []
        original = AsyncResult.match

        def recording(self, on_ok, on_fail):
            matched.append(on_ok)
            return original(self, on_ok, on_fail)

        monkeypatch.setattr(AsyncResult, 'match', recording)
        seen = []
        switched = AsyncResult.from_ok(1).switch(seen.append, seen.append)
        assert matched == []
        await switched
        assert matched == [seen.append]
        assert seen == [1]

    @pytest.mark.asyncio
    async def test_async_option_switch(self, monkeypatch):
        matched = []
        original = AsyncOption.match

        def recording(self, on_some, on_none):
            matched.append(on_none)
            return original(self, on_some, on_none)

        monkeypatch.setattr(AsyncOption, 'match', recording)
        seen = []

        def on_none():
            seen.append('none')

        switched = AsyncOption.nothing().switch(seen.append, on_none)
        assert matched == []
        await switched
        assert matched == [on_none]
        assert seen == ['none']

    def test_handlers_checked_eagerly(self):
        with pytest.raises(ArgumentError):
            AsyncResult(None).switch(str, None)  # type: ignore[arg-type]
        with pytest.raises(ArgumentError):
            AsyncOption(None).switch(None, str)  # type: ignore[arg-type]
