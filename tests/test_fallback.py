from datetime import date, datetime

from agenda import AppointmentInterpreter, FixedClock
from agenda.fallback import DateparserFallback
from conftest import SUNDAY, TZ, TZ_NAME


def test_finds_day_and_month_ahead_of_reference():
    assert DateparserFallback()("jogo em 20 de abril", SUNDAY) == date(2024, 4, 20)


def test_time_marker_is_not_read_as_part_of_the_date():
    fallback = DateparserFallback()
    assert fallback("jogo em 20 de abril às 16h", SUNDAY) == date(2024, 4, 20)
    assert fallback("reunião em 5 de maio às 9", SUNDAY) == date(2024, 5, 5)


def test_interpreter_uses_the_library_parser_by_default():
    interpreter = AppointmentInterpreter(TZ_NAME, clock=FixedClock(SUNDAY))
    draft = interpreter.interpret("jogo em 20 de abril às 16h")
    assert draft.date_time == datetime(2024, 4, 20, 16, 0, tzinfo=TZ)
    assert draft.date_rule == "fallback"
