import pytest

from dotairc.ingestion.template_loader import DictTemplateLookup


@pytest.fixture
def lookup():
    return DictTemplateLookup({
        "vue": "Vue.js rules",
        "html": "HTML rules",
    })


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("DOTAIRC_TEMPLATES_DIR", raising=False)
    monkeypatch.delenv("DOTAIRC_OUTPUT", raising=False)
