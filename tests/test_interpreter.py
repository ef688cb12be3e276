from datetime import date, datetime, timezone

import pytest

from agenda import (
    AgendaError,
    AppointmentDraft,
    AppointmentInterpreter,
    ErrorKind,
    FixedClock,
    Strictness,
    confirmation_message,
)
from conftest import SUNDAY, TZ, TZ_NAME, WEDNESDAY, StubFallback


class CountingClock:
    def __init__(self, instant):
        self.instant = instant
        self.calls = 0

    def now(self):
        self.calls += 1
        return self.instant


def make(now=SUNDAY, mode=Strictness.LENIENT, fallback=None):
    return AppointmentInterpreter(TZ_NAME, mode, clock=FixedClock(now), fallback=fallback or StubFallback())


def test_day_after_tomorrow_with_time():
    draft = make().interpret("depois de amanhã às 10h")
    assert draft.date_time == datetime(2024, 3, 12, 10, 0, tzinfo=TZ)


def test_meeting_on_day_24():
    interpreter = make()
    draft = interpreter.interpret("marque reunião dia 24 às 15h")
    assert draft.title == "reunião"
    assert draft.date_time == datetime(2024, 3, 24, 15, 0, tzinfo=TZ)
    assert draft.date_rule == "day_of_month"
    assert interpreter.confirmation(draft) == "Compromisso marcado: reunião em 24/03/2024 às 15:00"


def test_weekday_message_from_wednesday():
    draft = make(WEDNESDAY).interpret("segunda-feira às 9")
    assert draft.date_time == datetime(2024, 3, 18, 9, 0, tzinfo=TZ)


def test_explicit_date_wins_over_weekday():
    draft = make(WEDNESDAY).interpret("marque dentista sexta 02/04/2024 às 8h")
    assert draft.date_time.date() == date(2024, 4, 2)
    assert draft.title == "dentista"


def test_reference_instant_is_read_in_configured_zone():
    # 02:00 UTC on the 11th is still 23:00 on the 10th in São Paulo.
    clock = FixedClock(datetime(2024, 3, 11, 2, 0, tzinfo=timezone.utc))
    interpreter = AppointmentInterpreter(TZ_NAME, clock=clock, fallback=StubFallback())
    assert interpreter.interpret("reunião hoje às 10").date_time.date() == date(2024, 3, 10)


def test_clock_is_read_once_per_message():
    clock = CountingClock(SUNDAY)
    interpreter = AppointmentInterpreter(TZ_NAME, clock=clock, fallback=StubFallback())
    interpreter.interpret("reunião amanhã às 10")
    assert clock.calls == 1


@pytest.mark.parametrize("message", [None, "", "   "])
def test_empty_message(message):
    with pytest.raises(AgendaError) as exc:
        make().interpret(message)
    assert exc.value.kind is ErrorKind.EMPTY_MESSAGE
    assert exc.value.message == "Mensagem é obrigatória"


@pytest.mark.parametrize("mode", [Strictness.STRICT, Strictness.LENIENT])
def test_missing_time_fails_in_every_mode(mode):
    with pytest.raises(AgendaError) as exc:
        make(mode=mode).interpret("marque reunião amanhã")
    assert exc.value.kind is ErrorKind.TIME_NOT_FOUND


def test_bare_verb_title_strict_vs_lenient():
    assert make().interpret("marque amanhã às 10h").title == ""
    with pytest.raises(AgendaError) as exc:
        make(mode=Strictness.STRICT).interpret("marque amanhã às 10h")
    assert exc.value.kind is ErrorKind.EMPTY_TITLE


def test_mode_can_be_overridden_per_call():
    interpreter = make()
    with pytest.raises(AgendaError) as exc:
        interpreter.interpret("reunião às 25h amanhã", mode="estrito")
    assert exc.value.kind is ErrorKind.INVALID_TIME
    assert interpreter.interpret("reunião às 25h amanhã").date_time.hour == 1


def test_lenient_uses_fallback_when_no_rule_matches():
    fallback = StubFallback(date(2024, 5, 5))
    draft = make(fallback=fallback).interpret("reunião em 5 de maio às 9")
    assert draft.date_time == datetime(2024, 5, 5, 9, 0, tzinfo=TZ)
    assert draft.date_rule == "fallback"


def test_strict_never_consults_fallback():
    fallback = StubFallback(date(2024, 5, 5))
    with pytest.raises(AgendaError) as exc:
        make(mode=Strictness.STRICT, fallback=fallback).interpret("reunião em 5 de maio às 9")
    assert exc.value.kind is ErrorKind.DATE_NOT_FOUND
    assert fallback.calls == []


def test_confirmation_renders_in_local_zone():
    draft = AppointmentDraft("reunião", datetime(2024, 3, 24, 18, 5, tzinfo=timezone.utc))
    assert confirmation_message(draft, TZ) == "Compromisso marcado: reunião em 24/03/2024 às 15:05"


def test_draft_is_immutable():
    draft = make().interpret("reunião amanhã às 10")
    with pytest.raises(AttributeError):
        draft.title = "outra"
