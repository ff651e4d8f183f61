def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import mdxfix.core.interfaces as I

    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "PreprocessorProtocol")
    assert hasattr(I, "SegmenterProtocol")


def test_default_implementations_satisfy_protocols():
    import logging

    from mdxfix.core.interfaces import LoggerFactoryProtocol, LoggerLikeProtocol, PreprocessorProtocol, SegmenterProtocol
    from mdxfix.logging.factory import DefaultLoggerFactory
    from mdxfix.preprocessor import Preprocessor
    from mdxfix.processing.segmenter import CodeSegmenter

    assert isinstance(CodeSegmenter(), SegmenterProtocol)
    assert isinstance(Preprocessor(), PreprocessorProtocol)
    assert isinstance(DefaultLoggerFactory(), LoggerFactoryProtocol)
    assert isinstance(logging.getLogger("mdxfix.test"), LoggerLikeProtocol)


def test_json_formatter_schema():
    import json
    import logging

    from mdxfix.logging.helpers import JsonLogFormatter, get_logger

    record = logging.LogRecord("mdxfix.test", logging.WARNING, __file__, 1, "rule %r failed", ("boom",), None)
    record.context = {"rule": "boom"}
    payload = json.loads(JsonLogFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["module"] == "mdxfix.test"
    assert payload["msg"] == "rule 'boom' failed"
    assert payload["ctx"] == {"rule": "boom"}
    assert payload["version"]
    assert get_logger("preprocessor").name == "mdxfix.preprocessor"
    assert get_logger().name == "mdxfix"
