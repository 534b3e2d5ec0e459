import pytest

from residuematrix import config


def test_default_is_inline(monkeypatch):
    monkeypatch.delenv(config.MAXWORKERS_ENV, raising=False)
    assert config.max_workers() == 0


@pytest.mark.parametrize("raw, expected", [("4", 4), (" 2 ", 2), ("", 0), ("0", 0)])
def test_reads_environment(monkeypatch, raw, expected):
    monkeypatch.setenv(config.MAXWORKERS_ENV, raw)
    assert config.max_workers() == expected


@pytest.mark.parametrize("raw", ["many", "-1", "1.5"])
def test_rejects_invalid_values(monkeypatch, raw):
    monkeypatch.setenv(config.MAXWORKERS_ENV, raw)
    with pytest.raises(ValueError, match=config.MAXWORKERS_ENV):
        config.max_workers()
