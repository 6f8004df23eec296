import logging

from memberstore.utils.logging import get_correlation_id, get_logger, set_correlation_id, time_call


def test_correlation_id_round_trip():
    token = set_correlation_id("log-entry-42")
    assert token == "log-entry-42"
    assert get_correlation_id() == "log-entry-42"


def test_loggers_share_package_namespace():
    assert get_logger("schema.migration").name == "memberstore.schema.migration"


def test_time_call_logs_duration(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("unit-test", logger, threshold_ms=0):
        pass
    messages = [record.message for record in caplog.records if record.name == logger.name]
    assert any("unit-test took" in message for message in messages)


def test_time_call_includes_sql(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("sqlite.execute", logger, sql="DROP TABLE npcs_", threshold_ms=0):
        pass
    records = [record for record in caplog.records if record.name == logger.name]
    assert records[-1].levelno == logging.WARNING
    assert records[-1].sql == "DROP TABLE npcs_"
    assert "DROP TABLE npcs_" in records[-1].message
