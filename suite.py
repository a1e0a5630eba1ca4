import sys
import time
from typing import List, Any, Callable, Tuple, Type

_registered: List[Tuple[str, Callable]] = []

_OK = '\033[92m'
_FAIL = '\033[91m'
_RESET = '\033[0m'


class SuiteAssertionError(AssertionError):
    """an assertion failure, as opposed to an unexpected error inside a test."""


def test(description: str) -> Callable:
    """register a function as a test case; the function itself is returned unchanged."""

    def decorator(func: Callable) -> Callable:
        _registered.append((description, func))
        return func

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable, *args: Any, **kwargs: Any) -> BaseException:
    """call func and return the error it raised; fail if it raised nothing or something else."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"expected {error_type.__name__} from {getattr(func, '__name__', func)!s}")


def run(title: str = "test run") -> int:
    """execute every registered test, print a report, return the number of failures."""
    print(f"\n--- {title} ---")
    start_time = time.perf_counter()

    failed = 0
    for description, func in _registered:
        try:
            func()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
        else:
            print(f"  {_OK}pass{_RESET}  {description}")
            continue
        failed += 1
        print(f"  {_FAIL}fail{_RESET}  {description}\n    -> {error}")

    duration = (time.perf_counter() - start_time) * 1000
    print(f"\n  ran {len(_registered)} tests in {duration:.2f}ms, {failed} failed\n")
    # cleared so several suites can run from one script
    _registered.clear()
    return failed


def main(title: str) -> None:
    sys.exit(1 if run(title) else 0)
