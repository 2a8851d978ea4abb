import asyncio
import unittest

from jonad import (
    of, empty,
    Failure, NoValueError,
    current_error_kinds, error_kinds, is_error,
)


class Problem:
    pass


class TestOrElseRaise(unittest.TestCase):
    def test_returns_value_when_present(self):
        self.assertEqual("1", of("1").or_else_raise(lambda: Exception("")))

    def test_raises_supplied_exception(self):
        with self.assertRaises(KeyError):
            empty().or_else_raise(lambda: KeyError("k"))

    def test_exception_class_as_factory(self):
        with self.assertRaises(LookupError):
            empty().or_else_raise(LookupError)

    def test_wraps_plain_values_in_failure(self):
        with self.assertRaises(Failure) as cm:
            empty().or_else_raise(lambda: "missing")
        self.assertEqual(cm.exception.error, "missing")

    def test_default_is_no_value_error(self):
        with self.assertRaises(NoValueError) as cm:
            empty().or_else_raise()
        self.assertTrue(isinstance(cm.exception, LookupError))
        self.assertTrue(isinstance(cm.exception, Failure))
        self.assertEqual(str(cm.exception), "no value present")

    def test_factory_not_called_when_present(self):
        calls = []
        of(1).or_else_raise(lambda: calls.append(1))
        self.assertEqual(calls, [])


class TestErrorKinds(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(current_error_kinds(), (BaseException,))
        self.assertTrue(is_error(ValueError()))
        self.assertTrue(is_error(KeyboardInterrupt()))
        self.assertFalse(is_error("boom"))
        self.assertFalse(is_error(None))

    def test_scoped_extension(self):
        with error_kinds(Problem) as kinds:
            self.assertEqual(kinds, (BaseException, Problem))
            self.assertTrue(is_error(Problem()))
        self.assertFalse(is_error(Problem()))
        self.assertEqual(current_error_kinds(), (BaseException,))

    def test_duplicates_ignored(self):
        with error_kinds(BaseException, Problem, Problem) as kinds:
            self.assertEqual(kinds, (BaseException, Problem))

    def test_nesting_restores_each_level(self):
        with error_kinds(Problem):
            with error_kinds(str, replace=True):
                self.assertTrue(is_error("boom"))
                self.assertFalse(is_error(ValueError()))
            self.assertTrue(is_error(Problem()))
            self.assertFalse(is_error("boom"))

    def test_restored_after_exception(self):
        with self.assertRaises(RuntimeError):
            with error_kinds(Problem):
                raise RuntimeError("x")
        self.assertFalse(is_error(Problem()))

    def test_rejects_non_types(self):
        with self.assertRaises(TypeError):
            with error_kinds("not-a-type"):  # type: ignore[arg-type]
                pass


class TestErrorKindsIsolation(unittest.IsolatedAsyncioTestCase):
    async def test_tasks_do_not_share_overrides(self):
        entered = asyncio.Event()
        release = asyncio.Event()

        async def scoped():
            with error_kinds(Problem):
                entered.set()
                await release.wait()
                return is_error(Problem())

        async def plain():
            await entered.wait()
            v = is_error(Problem())
            release.set()
            return v

        inside, outside = await asyncio.gather(scoped(), plain())
        self.assertTrue(inside)
        self.assertFalse(outside)


if __name__ == "__main__":
    unittest.main()
