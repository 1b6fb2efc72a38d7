# tests/test_language_service.py
import asyncio

import pytest

from language_catalog_api.app.services.language_service import LanguageService, parse_id


def test_list_languages_returns_all_in_order(service):
    languages = asyncio.run(service.list_languages())
    assert [l.id for l in languages] == [1, 2, 3, 4]


@pytest.mark.parametrize("language_id", [1, 2, 3, 4, "1", "4", " 2 "])
def test_get_language_returns_requested_id(service, language_id):
    language = asyncio.run(service.get_language(language_id))
    assert language is not None
    assert language.id == int(str(language_id).strip())


@pytest.mark.parametrize("language_id", ["abc", "", "1.5", None, 99, "99", "0_1", "\u0661", "1abc"])
def test_get_language_not_found(service, language_id):
    assert asyncio.run(service.get_language(language_id)) is None


def test_parse_id():
    assert parse_id("7") == 7
    assert parse_id(7) == 7
    assert parse_id("seven") is None
    assert parse_id(True) is None
    assert parse_id("0_1") is None
    assert parse_id("١") is None
    assert parse_id(" +3 ") == 3


def test_response_delay_is_applied(dataset, monkeypatch):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    service = LanguageService(dataset, response_delay_ms=250)
    asyncio.run(service.list_languages())
    assert delays == [0.25]


def test_no_delay_by_default(service, monkeypatch):
    async def fail_sleep(seconds):
        raise AssertionError("unexpected sleep")

    monkeypatch.setattr(asyncio, "sleep", fail_sleep)
    asyncio.run(service.list_languages())
