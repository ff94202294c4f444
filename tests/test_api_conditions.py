"""Tests for the condition builder API endpoints."""

import pytest
from fastapi.testclient import TestClient

from condition_builder.conditions import on_register_condition_rule_types
from condition_builder.entries import (
    CommentCountConditionRule,
    EntryCondition,
    HasUrlConditionRule,
    SlugConditionRule,
    TitleConditionRule,
)
from condition_builder.main import app

from sample_types import A, B, C, K


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def entry_config(entry_condition: EntryCondition) -> dict:
    return entry_condition.get_config()


def _uids(body: dict) -> list[str]:
    return [r["uid"] for r in body["config"]["conditionRules"]]


class TestRender:
    def test_render(self, client: TestClient, entry_config: dict):
        response = client.post("/conditions/render", json={"config": entry_config})

        assert response.status_code == 200
        body = response.json()
        assert body["config"] == entry_config
        assert body["conditionRuleTypes"][0] == TitleConditionRule.type_id()
        assert [o["label"] for o in body["ruleTypeOptions"]] == ["Has URL", "Slug", "Status", "Title"]
        assert body["addRuleLabel"] == "Add a rule"

    def test_render_applies_client_order(self, client: TestClient, entry_config: dict):
        entry_config["conditionRules"].reverse()

        response = client.post("/conditions/render", json={"config": entry_config})

        assert _uids(response.json()) == ["has-url", "status", "title"]

    def test_rule_type_override_round_trips(self, client: TestClient):
        config = {"type": K, "conditionRules": [{"type": C, "uid": "c"}]}

        response = client.post(
            "/conditions/render",
            json={"config": config, "conditionRuleTypes": [C]},
        )

        assert response.status_code == 200
        assert response.json()["conditionRuleTypes"] == [C]

    def test_handlers_apply(self, client: TestClient):
        on_register_condition_rule_types(
            lambda event: event.condition_rule_types.append(CommentCountConditionRule),
            condition_class=EntryCondition,
        )

        response = client.post(
            "/conditions/render",
            json={"config": {"type": EntryCondition.type_id()}},
        )

        assert CommentCountConditionRule.type_id() in response.json()["conditionRuleTypes"]

    def test_unknown_condition_type(self, client: TestClient):
        response = client.post("/conditions/render", json={"config": {"type": "nope.Condition"}})
        assert response.status_code == 400
        assert "nope.Condition" in response.json()["detail"]

    def test_rule_not_allowed(self, client: TestClient):
        config = {"type": K, "conditionRules": [{"type": C}]}
        response = client.post("/conditions/render", json={"config": config})
        assert response.status_code == 400

    def test_malformed_config(self, client: TestClient):
        response = client.post("/conditions/render", json={"config": {"conditionRules": []}})
        assert response.status_code == 422

    def test_malformed_rule(self, client: TestClient):
        config = {"type": K, "conditionRules": [{"type": B, "count": "many"}]}
        response = client.post("/conditions/render", json={"config": config})
        assert response.status_code == 422


class TestRuleActions:
    def test_add_rule_defaults_to_first_type(self, client: TestClient):
        response = client.post("/conditions/add-rule", json={"config": {"type": K}})

        assert response.status_code == 200
        rules = response.json()["config"]["conditionRules"]
        assert len(rules) == 1
        assert rules[0]["type"] == A
        assert rules[0]["uid"]

    def test_add_rule_of_type(self, client: TestClient, entry_config: dict):
        response = client.post(
            "/conditions/add-rule",
            json={"config": entry_config, "type": SlugConditionRule.type_id()},
        )

        rules = response.json()["config"]["conditionRules"]
        assert len(rules) == 4
        assert rules[-1]["type"] == SlugConditionRule.type_id()

    def test_add_rule_not_allowed(self, client: TestClient):
        response = client.post("/conditions/add-rule", json={"config": {"type": K}, "type": C})
        assert response.status_code == 400

    def test_remove_rule(self, client: TestClient, entry_config: dict):
        response = client.post(
            "/conditions/remove-rule",
            json={"config": entry_config, "uid": "status"},
        )

        assert response.status_code == 200
        assert _uids(response.json()) == ["title", "has-url"]

    def test_remove_unknown_rule(self, client: TestClient, entry_config: dict):
        response = client.post(
            "/conditions/remove-rule",
            json={"config": entry_config, "uid": "missing"},
        )
        assert response.status_code == 404

    def test_switch_rule_type(self, client: TestClient, entry_config: dict):
        response = client.post(
            "/conditions/switch-rule-type",
            json={"config": entry_config, "uid": "title", "type": HasUrlConditionRule.type_id()},
        )

        assert response.status_code == 200
        first = response.json()["config"]["conditionRules"][0]
        assert first == {"type": HasUrlConditionRule.type_id(), "uid": "title", "value": True}

    def test_switch_to_unknown_type(self, client: TestClient, entry_config: dict):
        response = client.post(
            "/conditions/switch-rule-type",
            json={"config": entry_config, "uid": "title", "type": "nope.Rule"},
        )
        assert response.status_code == 400

    def test_reorder(self, client: TestClient, entry_config: dict):
        response = client.post(
            "/conditions/reorder",
            json={"config": entry_config, "uids": ["status", "has-url", "title"]},
        )

        assert _uids(response.json()) == ["status", "has-url", "title"]

    def test_reorder_incomplete(self, client: TestClient, entry_config: dict):
        response = client.post(
            "/conditions/reorder",
            json={"config": entry_config, "uids": ["status"]},
        )
        assert response.status_code == 400


class TestMisc:
    def test_list_types(self, client: TestClient):
        body = client.get("/conditions/types").json()
        assert EntryCondition.type_id() in body["types"]
        assert K in body["types"]
        assert body["total"] == len(body["types"])

    def test_health(self, client: TestClient):
        assert client.get("/health").json()["status"] == "ok"
