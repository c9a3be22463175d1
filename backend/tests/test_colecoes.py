from types import SimpleNamespace
from unittest.mock import MagicMock

from sqlalchemy.exc import SQLAlchemyError

from gestao_os.services.colecoes import load_collection, search


def test_search_is_case_insensitive_substring():
    itens = [SimpleNamespace(nome="Acme Uniformes"), SimpleNamespace(nome="Escola Estadual"), SimpleNamespace(nome=None)]
    assert [item.nome for item in search(itens, "ACME", lambda item: item.nome)] == ["Acme Uniformes"]


def test_search_without_term_returns_everything():
    itens = [SimpleNamespace(nome="A"), SimpleNamespace(nome="B")]
    assert search(itens, None, lambda item: item.nome) == itens
    assert search(itens, "", lambda item: item.nome) == itens


def test_search_matches_any_field():
    itens = [SimpleNamespace(numero="00012", referencia="Copa"), SimpleNamespace(numero="00013", referencia="Festa")]
    encontrados = search(itens, "fest", lambda item: item.numero, lambda item: item.referencia)
    assert [item.numero for item in encontrados] == ["00013"]


def test_load_collection_returns_empty_list_on_store_error(caplog):
    db = MagicMock()
    query = MagicMock()
    query.all.side_effect = SQLAlchemyError("connection lost")

    assert load_collection(db, query, "ordens") == []
    db.rollback.assert_called_once()
    assert "Erro ao carregar ordens" in caplog.text


def test_search_term_is_not_trimmed():
    itens = [SimpleNamespace(descricao="Camiseta polo"), SimpleNamespace(descricao="Polo infantil")]
    encontrados = search(itens, " polo", lambda item: item.descricao)
    assert [item.descricao for item in encontrados] == ["Camiseta polo"]
