import logging
import os
import shutil
import tempfile
import unittest

from pyrefframe.logger import (
    ROOT_LOGGER_NAME, ColoredFormatter, LogContext, LoggerConfig, LogLevel, get_logger, setup_logger
)


class TestLogger(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        root = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        root.setLevel(logging.NOTSET)
        shutil.rmtree(self.test_dir)

    def test_trace_level(self):
        self.assertEqual(LogLevel.TRACE.value, 5)
        self.assertEqual(logging.getLevelName(5), "TRACE")
        self.assertEqual(LogLevel.from_name("trace"), 5)
        with self.assertRaises(ValueError):
            LogLevel.from_name("verbose")
        with self.assertRaises(ValueError):
            LogLevel.from_name(10)

    def test_trace_method(self):
        logger = get_logger('pyrefframe.test')
        with self.assertLogs(logger, level=LogLevel.TRACE.value) as cm:
            logger.trace("searching %s", "ITRF2020")
        self.assertEqual(cm.records[0].levelname, "TRACE")
        self.assertEqual(cm.records[0].getMessage(), "searching ITRF2020")

    def test_setup_logger_file(self):
        log_file = os.path.join(self.test_dir, "pyrefframe.log")
        logger = setup_logger(ROOT_LOGGER_NAME, "DEBUG", log_file=log_file, console=False)
        logger.debug("written")
        for handler in logger.handlers:
            handler.flush()

        with open(log_file) as f:
            self.assertIn("written", f.read())

    def test_setup_logger_replaces_handlers(self):
        setup_logger(ROOT_LOGGER_NAME, "INFO")
        logger = setup_logger(ROOT_LOGGER_NAME, "INFO")
        self.assertEqual(len(logger.handlers), 1)

    def test_colored_formatter_keeps_record(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        text = ColoredFormatter('%(levelname)s %(message)s').format(record)
        self.assertIn("INFO", text)
        self.assertEqual(record.levelname, "INFO")

    def test_log_context(self):
        logger = get_logger('pyrefframe.context')
        logger.setLevel(logging.WARNING)
        with LogContext(logger, "DEBUG"):
            self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(logger.level, logging.WARNING)

    def test_module_levels(self):
        config = LoggerConfig()
        config.configure_from_dict({
            'default_level': 'WARNING',
            'console': True,
            'module_levels': {'pyrefframe.reference_frame.repository': 'TRACE'},
        })
        config.setup_all_loggers()

        module_logger = logging.getLogger('pyrefframe.reference_frame.repository')
        self.assertEqual(module_logger.level, 5)
        self.assertEqual(logging.getLogger(ROOT_LOGGER_NAME).level, logging.WARNING)
        self.assertTrue(all(h.level <= 5 for h in logging.getLogger(ROOT_LOGGER_NAME).handlers))
        module_logger.setLevel(logging.NOTSET)


if __name__ == '__main__':
    unittest.main()
