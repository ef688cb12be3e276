import pytest

from agenda import AgendaError, ErrorKind, Strictness, extract_title

MESSAGES = [
    ("marque reunião dia 24 às 15h", "reunião"),
    ("marque uma reunião amanhã às 10h", "reunião"),
    ("anota compromisso segunda-feira da semana que vem às 9", "compromisso"),
    ("agende dentista depois de amanhã às 14:30", "dentista"),
    ("Marque consulta com a Dra. Ana 25/12/2024 às 10h", "consulta com a Dra. Ana"),
    ("agenda revisão do carro daqui a 3 dias às 8", "revisão do carro"),
    ("marque academia na próxima sexta às 7", "academia"),
    ("marque almoço no próximo mês às 12", "almoço"),
    ("marque viagem de férias no próximo ano dia 10 às 6", "viagem férias"),
    ("anote um café hoje às 16h", "café"),
    ("marque reunião proxima terca às 10", "reunião"),
    ("Marque Reunião De Equipe hoje às 9", "Reunião Equipe"),
    ("agende churrasco próximo sábado às 13h", "churrasco"),
    ("marque treino semana que vem às 18h", "treino"),
    ("Compromisso marcado: reunião amanhã às 10", "reunião"),
    ("marque reunião amanhã, às 10h", "reunião"),
]


@pytest.mark.parametrize("message, expected", MESSAGES)
def test_extract_title(message, expected):
    assert extract_title(message) == expected


@pytest.mark.parametrize("message", [m for m, _ in MESSAGES])
def test_extract_title_is_idempotent(message):
    once = extract_title(message)
    assert extract_title(once) == once


def test_dangling_preposition_is_dropped():
    assert extract_title("reunião na segunda às 10") == "reunião"
    assert extract_title("jogo em 20/04/2024 às 16h") == "jogo"


def test_leading_article_only_at_start():
    assert extract_title("reunião com uma cliente amanhã às 9") == "reunião com uma cliente"


def test_verb_must_be_a_whole_word():
    assert extract_title("marcação de exame amanhã às 9") == "marcação exame"


def test_bare_verb_gives_empty_title_in_lenient_mode():
    assert extract_title("marque amanhã às 10h") == ""


def test_bare_verb_fails_in_strict_mode():
    with pytest.raises(AgendaError) as exc:
        extract_title("marque amanhã às 10h", Strictness.STRICT)
    assert exc.value.kind is ErrorKind.EMPTY_TITLE


def test_whitespace_only_title_fails_in_strict_mode():
    with pytest.raises(AgendaError) as exc:
        extract_title("   hoje   às 9  ", Strictness.STRICT)
    assert exc.value.kind is ErrorKind.EMPTY_TITLE


def test_title_keeps_original_accents_and_case():
    assert extract_title("Anote Almoço com a Mãe amanhã às 12") == "Almoço com a Mãe"
