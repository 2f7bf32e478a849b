import asyncio

import pytest

from fallible import AsyncOption, AsyncResult, EmptyAccess, Option, absent, present


def test_consumers_get_plain_values() -> None:
    async def run_flow():
        op = present(10).to_async()
        anon = absent().to_async()

        async def times_ten(v: int) -> int:
            return v * 10

        async def fallback() -> int:
            return 55

        assert await op.unwrap() == 10
        assert await anon.unwrap_or(15) == 15
        assert await op.unwrap_or_else(lambda: 20) == 10
        assert await anon.unwrap_or_else(fallback) == 55
        assert await anon.match(present=times_ten, absent=fallback) == 55
        assert await op.match(present=times_ten, absent=fallback) == 100

    asyncio.run(run_flow())


def test_unwrap_absent_raises() -> None:
    with pytest.raises(EmptyAccess):
        asyncio.run(absent().to_async().unwrap())
    with pytest.raises(EmptyAccess, match="no user"):
        asyncio.run(absent().to_async().expect("no user"))


def test_combinators_delegate_to_inner_option() -> None:
    async def run_flow():
        op = present(10).to_async()
        anon = absent().to_async()

        async def above_twenty(v: int) -> bool:
            return v > 20

        assert await op.test(above_twenty) is False
        assert (await op.map(lambda v: v * 2)).unwrap() == 20
        assert (await op.and_then(lambda v: present(v * 3))).unwrap() == 30
        assert await op.filter(lambda v: v > 20) is absent()
        assert (await anon.insert(100)).unwrap() == 100
        assert (await op.insert_with(lambda: 100)).unwrap() == 10
        assert (await op.or_else(lambda: present(30))).unwrap() == 10
        assert await anon.and_(present(10)) is absent()
        assert (await op.or_(absent())).unwrap() == 10
        assert await op.xor(present(20)) is absent()
        assert (await anon.xor(present(20))).unwrap() == 20
        assert (await op.zip(present(1))).unwrap() == (10, 1)
        assert (await op.zip_with(present(5), lambda a, b: a - b)).unwrap() == 5

    asyncio.run(run_flow())


def test_async_transforms_are_awaited() -> None:
    async def run_flow():
        async def double(v: int) -> int:
            return v * 2

        async def keep(v: int) -> Option[int]:
            return present(v + 1)

        return await present(4).to_async().map(double).and_then(keep).unwrap()

    assert asyncio.run(run_flow()) == 9


def test_other_operand_may_be_pending() -> None:
    async def run_flow():
        op = present(1).to_async()
        pending = present(2).to_async().map(lambda v: v * 10)
        return await op.and_(pending).unwrap()

    assert asyncio.run(run_flow()) == 20


def test_chain_runs_in_call_order() -> None:
    async def run_flow():
        order: list[str] = []

        async def first(v: int) -> int:
            await asyncio.sleep(0.01)
            order.append("first")
            return v + 1

        def second(v: int) -> int:
            order.append("second")
            return v * 2

        value = await present(1).to_async().map(first).map(second).unwrap()
        return value, order

    value, order = asyncio.run(run_flow())
    assert value == 4
    assert order == ["first", "second"]


def test_settles_once() -> None:
    async def run_flow():
        calls = 0

        async def compute() -> Option[int]:
            nonlocal calls
            calls += 1
            return present(calls)

        pending = AsyncOption(_run=compute)
        assert not pending.is_settled
        first = await pending
        second = await pending
        return first, second, calls, pending.is_settled

    first, second, calls, settled = asyncio.run(run_flow())
    assert first is second
    assert calls == 1
    assert settled


def test_rejected_computation_propagates() -> None:
    async def broken() -> Option[int]:
        raise RuntimeError("lost connection")

    chain = AsyncOption(_run=broken).map(lambda v: v + 1)
    with pytest.raises(RuntimeError, match="lost connection"):
        asyncio.run(chain.unwrap_or(0))


def test_from_awaitable() -> None:
    async def lookup() -> Option[str]:
        return present("found")

    assert asyncio.run(AsyncOption.from_awaitable(lookup()).unwrap()) == "found"


def test_convert_to_async_result_or_result() -> None:
    async def run_flow():
        op = present(10).to_async()
        anon = absent().to_async()

        converted = anon.to_async_result(lambda: "error")
        assert isinstance(converted, AsyncResult)
        assert await converted.unwrap_err() == "error"
        assert await op.to_async_result(lambda: "error").unwrap() == 10
        assert (await op.to_result(lambda: "error")).unwrap() == 10
        assert (await anon.to_result(lambda: "error")).unwrap_err() == "error"

    asyncio.run(run_flow())


@pytest.mark.asyncio
async def test_repr_reports_settlement() -> None:
    op = present(1).to_async()
    assert repr(op) == "AsyncOption(<pending>)"
    await op
    assert repr(op) == "AsyncOption(<settled>)"


def test_short_circuit_skips_failing_operand() -> None:
    async def broken() -> Option[int]:
        raise RuntimeError("other failed")

    async def run_flow():
        anon = absent().to_async()
        op = present(1).to_async()
        assert await anon.and_(AsyncOption(_run=broken)) is absent()
        assert await anon.zip(AsyncOption(_run=broken)) is absent()
        assert await anon.zip_with(AsyncOption(_run=broken), lambda a, b: a + b) is absent()
        assert await op.or_(AsyncOption(_run=broken)).unwrap() == 1

    asyncio.run(run_flow())


def test_xor_needs_both_operands() -> None:
    async def broken() -> Option[int]:
        raise RuntimeError("other failed")

    with pytest.raises(RuntimeError, match="other failed"):
        asyncio.run(present(1).to_async().xor(AsyncOption(_run=broken)).resolve())


def test_skipped_coroutine_is_closed() -> None:
    calls: list[str] = []

    async def lookup() -> Option[int]:
        calls.append("lookup")
        return present(2)

    async def run_flow():
        pending = lookup()
        result = await absent().to_async().and_(pending)
        return result, pending.cr_frame

    result, frame = asyncio.run(run_flow())
    assert result is absent()
    assert frame is None
    assert calls == []


def test_cancelled_awaiter_does_not_cancel_shared_option() -> None:
    async def run_flow():
        async def slow() -> Option[int]:
            await asyncio.sleep(0.01)
            return present(1)

        shared = AsyncOption(_run=slow)
        first = asyncio.ensure_future(shared.unwrap())
        await asyncio.sleep(0)
        first.cancel()
        with pytest.raises(asyncio.CancelledError):
            await first
        value = await shared.unwrap()
        return value, shared.is_settled

    value, settled = asyncio.run(run_flow())
    assert value == 1
    assert settled
