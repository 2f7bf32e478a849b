import asyncio

from fallible import (
    AsyncResult,
    absent,
    collect_options,
    collect_results,
    failure,
    first_present,
    flatten_option,
    flatten_result,
    partition,
    present,
    sequence,
    sequence_async,
    success,
    traverse,
)
from fallible.combinators import laws


def parse_int(text: str):
    return success(int(text)) if text.isdigit() else failure(f"not a number: {text}")


def test_sequence_stops_at_first_failure() -> None:
    assert sequence([success(1), success(2)]).unwrap() == [1, 2]
    assert sequence([success(1), failure("a"), failure("b")]).unwrap_err() == "a"
    assert sequence([]).unwrap() == []


def test_traverse_does_not_call_after_failure() -> None:
    seen: list[str] = []

    def tracked(text: str):
        seen.append(text)
        return parse_int(text)

    assert traverse(["1", "2"], tracked).unwrap() == [1, 2]
    seen.clear()
    assert traverse(["1", "x", "3"], tracked).unwrap_err() == "not a number: x"
    assert seen == ["1", "x"]


def test_collect_results_keeps_every_error() -> None:
    results = [parse_int(t) for t in ("1", "a", "2", "b")]
    assert collect_results(results).unwrap_err() == ["not a number: a", "not a number: b"]
    assert collect_results([success(1)]).unwrap() == [1]


def test_partition() -> None:
    values, errors = partition([success(1), failure("e"), success(2)])
    assert values == [1, 2]
    assert errors == ["e"]


def test_option_collections() -> None:
    assert collect_options([present(1), present(2)]).unwrap() == [1, 2]
    assert collect_options([present(1), absent()]) is absent()
    assert first_present([absent(), present(2), present(3)]).unwrap() == 2
    assert first_present([absent()]) is absent()


def test_flatten() -> None:
    assert flatten_option(present(present(1))).unwrap() == 1
    assert flatten_option(present(absent())) is absent()
    assert flatten_option(absent()) is absent()
    assert flatten_result(success(success(1))).unwrap() == 1
    assert flatten_result(success(failure("inner"))).unwrap_err() == "inner"
    assert flatten_result(failure("outer")).unwrap_err() == "outer"


def test_sequence_async_is_sequential() -> None:
    async def run_flow():
        order: list[int] = []

        def step(n: int) -> AsyncResult[int, str]:
            async def run() -> int:
                order.append(n)
                return n

            return AsyncResult.challenge(run)

        ok = await sequence_async([step(1), step(2), step(3)]).unwrap()
        order_ok = list(order)
        order.clear()
        failed = await sequence_async(
            [step(1), failure("stop").to_async(), step(3)]
        ).unwrap_err()
        return ok, order_ok, failed, order

    ok, order_ok, failed, order = asyncio.run(run_flow())
    assert ok == [1, 2, 3]
    assert order_ok == [1, 2, 3]
    assert failed == "stop"
    assert order == [1]


def double(v: int) -> int:
    return v * 2


def increment(v: int) -> int:
    return v + 1


def half_option(v: int):
    return present(v // 2) if v % 2 == 0 else absent()


def half_result(v: int):
    return success(v // 2) if v % 2 == 0 else failure("odd")


def test_functor_laws() -> None:
    for m in (present(4), absent(), success(4), failure("e")):
        assert laws.functor_identity(m)
        assert laws.functor_composition(m, double, increment)


def test_monad_laws() -> None:
    for value in (4, 6, 3):
        assert laws.left_identity(present, value, half_option)
        assert laws.left_identity(success, value, half_result)
    for m in (present(8), present(6), absent()):
        assert laws.right_identity(m, present)
        assert laws.associativity(m, half_option, half_option)
    for m in (success(8), success(6), failure("e")):
        assert laws.right_identity(m, success)
        assert laws.associativity(m, half_result, half_result)


def test_boolean_algebra_laws() -> None:
    options = (present(1), present(2), absent())
    for option in options:
        for other in options:
            assert laws.short_circuit(option, other)
            assert laws.exclusive_or(option, other)


def test_absorption() -> None:
    def explode(_):
        raise AssertionError("should not be called")

    assert laws.absorption(absent(), explode)
    assert laws.absorption(failure("e"), explode)
