import json

import pytest

from wse_finance.projects import ProjectNotFound, ProjectStore, default_store_path


@pytest.fixture
def store(tmp_path):
    return ProjectStore(tmp_path / "store" / "projects.json")


def test_empty_store(store):
    assert store.names() == []
    assert not store.path.exists()


def test_save_and_load(store, reference_inputs):
    store.save("Reference", reference_inputs)
    assert store.path.exists()
    assert store.load("Reference") == reference_inputs


def test_names_sorted_and_trimmed(store, reference_inputs):
    store.save("  beta ", reference_inputs)
    store.save("Alpha", reference_inputs)
    assert store.names() == ["Alpha", "beta"]


def test_overwrite(store, reference_inputs):
    from dataclasses import replace

    store.save("p", reference_inputs)
    store.save("p", replace(reference_inputs, tariff=95.0))
    assert store.names() == ["p"]
    assert store.load("p").tariff == 95.0


def test_file_is_plain_json(store, reference_inputs):
    store.save("p", reference_inputs)
    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert data["p"]["capex"] == 1000000
    assert data["p"]["finance_term"] == 10


def test_empty_name_rejected(store, reference_inputs):
    with pytest.raises(ValueError):
        store.save("   ", reference_inputs)


def test_delete(store, reference_inputs):
    store.save("a", reference_inputs)
    store.save("b", reference_inputs)
    store.delete("a")
    assert store.names() == ["b"]


def test_missing_project(store):
    with pytest.raises(ProjectNotFound):
        store.load("nope")
    with pytest.raises(KeyError):
        store.delete("nope")


def test_corrupt_store(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError, match="expected a JSON object"):
        store.names()


def test_default_path_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("WSE_PROJECTS_FILE", str(tmp_path / "p.json"))
    assert default_store_path() == tmp_path / "p.json"
    assert ProjectStore().path == tmp_path / "p.json"
    monkeypatch.delenv("WSE_PROJECTS_FILE")
    assert default_store_path().name == "projects.json"


def test_load_camel_case_string_entry(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text(json.dumps({
        "Solar A": {
            "projectName": "Solar A",
            "energyOutput": "10000",
            "capex": "1000000",
            "opexPercent": "2",
            "projectLife": "20",
            "developmentTime": "2",
            "discountRate": "8",
            "financeTerm": "10",
            "debtEquityRatio": "70",
            "interestRate": "6",
            "tariff": "80",
            "rec": "20",
        }
    }), encoding="utf-8")
    p = store.load("Solar A")
    assert p.energy_output == 10000.0
    assert p.finance_term == 10 and isinstance(p.finance_term, int)
    assert p.development_time == 2.0
    assert p.rec == 20.0
