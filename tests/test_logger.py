import io
import json
import unittest
from contextlib import redirect_stderr

from jonad import ConsoleLogger, of, empty


class TestConsoleLogger(unittest.TestCase):
    def test_text_output_with_bound_fields(self):
        logger = ConsoleLogger(name="t", level="DEBUG").bind(req="r1")
        buf = io.StringIO()
        with redirect_stderr(buf):
            logger.info("hello", n=2)
        line = buf.getvalue().strip()
        self.assertIn("t INFO: hello", line)
        self.assertTrue(line.endswith("n=2 req=r1"))

    def test_json_output(self):
        logger = ConsoleLogger(json_output=True)
        buf = io.StringIO()
        with redirect_stderr(buf):
            logger.error("bad", code=7)
        rec = json.loads(buf.getvalue())
        self.assertEqual(rec["name"], "jonad")
        self.assertEqual(rec["level"], "ERROR")
        self.assertEqual(rec["fields"], {"code": 7})

    def test_level_filtering(self):
        logger = ConsoleLogger(level="WARN")
        buf = io.StringIO()
        with redirect_stderr(buf):
            logger.info("dropped")
            logger.warn("kept")
        self.assertEqual(len(buf.getvalue().strip().splitlines()), 1)
        logger.set_level("debug")
        self.assertEqual(logger.level_name, "DEBUG")

    def test_unknown_level(self):
        with self.assertRaises(ValueError):
            ConsoleLogger().log("LOUD", "x")


class TestJonadLog(unittest.TestCase):
    def _records(self, fn):
        buf = io.StringIO()
        with redirect_stderr(buf):
            fn()
        return [json.loads(l) for l in buf.getvalue().strip().splitlines()]

    def test_present(self):
        logger = ConsoleLogger(level="DEBUG", json_output=True)
        j = of("v")
        recs = self._records(lambda: self.assertIs(j, j.log(logger, "lookup")))
        self.assertEqual(len(recs), 1)
        self.assertEqual(recs[0]["msg"], "lookup")
        self.assertEqual(recs[0]["level"], "DEBUG")
        self.assertEqual(recs[0]["fields"], {"state": "present", "value": "'v'"})

    def test_empty(self):
        logger = ConsoleLogger(level="DEBUG", json_output=True)
        recs = self._records(lambda: empty().log(logger, level="INFO"))
        self.assertEqual(recs[0]["level"], "INFO")
        self.assertEqual(recs[0]["fields"], {"state": "empty"})

    def test_error_logged_at_error_level(self):
        logger = ConsoleLogger(level="WARN", json_output=True)
        recs = self._records(lambda: of(KeyError("k")).log(logger))
        self.assertEqual(recs[0]["level"], "ERROR")
        self.assertEqual(recs[0]["fields"]["state"], "error")
        self.assertEqual(recs[0]["fields"]["kind"], "KeyError")

    def test_below_level_writes_nothing(self):
        logger = ConsoleLogger(level="INFO", json_output=True)
        buf = io.StringIO()
        with redirect_stderr(buf):
            of(1).log(logger).map(lambda x: x + 1).log(logger)
        self.assertEqual(buf.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
