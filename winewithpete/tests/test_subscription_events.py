import pytest
from fastapi.testclient import TestClient
from winewithpete.api.api_run import app
from winewithpete.domain.Member import SubscriptionTier
from winewithpete.events import web_observers
from winewithpete.infra.Member_Repository import MemberRepository
from winewithpete.logic.members.subscription import apply_subscription_event, tier_for_event
from winewithpete.utilities import config
from winewithpete.utilities.errors import MemberNotFoundError, UnknownTierError
from winewithpete.utilities.validators import SubscriptionEventInput


def _event(event_type, **metadata):
    return SubscriptionEventInput(id="evt_1", type=event_type, data={"object": {"metadata": metadata}})


def test_tier_for_event():
    assert tier_for_event(_event("checkout.session.completed", subscription_tier="founder")) is SubscriptionTier.FOUNDER
    assert tier_for_event(_event("customer.subscription.deleted")) is SubscriptionTier.FREE
    assert tier_for_event(_event("invoice.paid")) is None
    with pytest.raises(UnknownTierError):
        tier_for_event(_event("customer.subscription.updated", subscription_tier="gold"))
    with pytest.raises(UnknownTierError):
        tier_for_event(_event("customer.subscription.created"))


def test_apply_upgrade_and_cancel(data_copy):
    repo = MemberRepository()
    member = apply_subscription_event(repo, _event("checkout.session.completed", subscription_tier="premium", user_id="user-free"))
    assert member.subscription_tier is SubscriptionTier.PREMIUM
    assert repo.get_member("user-free").subscription_tier is SubscriptionTier.PREMIUM

    member = apply_subscription_event(repo, _event("customer.subscription.deleted", user_id="user-free"))
    assert member.subscription_tier is SubscriptionTier.FREE


def test_apply_fixes_unrecognized_stored_tier(data_copy):
    repo = MemberRepository()
    member = apply_subscription_event(repo, _event("customer.subscription.updated", subscription_tier="founder", user_id="user-legacy"))
    assert member.to_dict()["subscription_tier"] == "founder"


def test_apply_unknown_member(data_copy):
    with pytest.raises(MemberNotFoundError):
        apply_subscription_event(MemberRepository(), _event("checkout.session.completed", subscription_tier="premium", user_id="ghost"))


def test_ignored_event_changes_nothing(data_copy):
    assert apply_subscription_event(MemberRepository(), _event("invoice.paid", user_id="user-free")) is None


def test_webhook_endpoint_requires_secret(data_copy, monkeypatch):
    monkeypatch.setattr(config, "WEBHOOK_SECRET", "whsec_test")
    client = TestClient(app)
    body = {"id": "evt_2", "type": "checkout.session.completed",
            "data": {"object": {"metadata": {"subscription_tier": "founder", "user_id": "user-premium"}}}}

    assert client.post('/api/subscription/events', json=body).status_code == 400
    assert client.post('/api/subscription/events', json=body, headers={"X-Webhook-Secret": "wrong"}).status_code == 400

    resp = client.post('/api/subscription/events', json=body, headers={"X-Webhook-Secret": "whsec_test"})
    assert resp.status_code == 200
    assert resp.json()["member"]["subscription_tier"] == "founder"

    body["data"]["object"]["metadata"]["subscription_tier"] = "gold"
    resp = client.post('/api/subscription/events', json=body, headers={"X-Webhook-Secret": "whsec_test"})
    assert resp.status_code == 400


def test_webhook_disabled_without_configured_secret(monkeypatch):
    monkeypatch.setattr(config, "WEBHOOK_SECRET", "")
    resp = TestClient(app).post('/api/subscription/events', json={"type": "invoice.paid"}, headers={"X-Webhook-Secret": ""})
    assert resp.status_code == 400


def test_tier_change_reaches_admin_activity_feed(data_copy, monkeypatch):
    monkeypatch.setattr(config, "ADMIN_TOKEN", "admin-secret")
    web_observers.start()
    client = TestClient(app)
    cursor = client.get('/api/admin/activity', headers={"Authorization": "Bearer admin-secret"}).json()['next_cursor']

    apply_subscription_event(MemberRepository(), _event("checkout.session.completed", subscription_tier="founder", user_id="user-free"))

    feed = client.get(f'/api/admin/activity?since={cursor}', headers={"Authorization": "Bearer admin-secret"}).json()
    changes = [e for e in feed['events'] if e['type'] == 'member.tier_changed']
    assert changes[-1]['email'] == 'fern@example.com'
    assert changes[-1]['previous'] == 'free'
    assert changes[-1]['tier'] == 'founder'
    assert feed['next_cursor'] > cursor


def test_admin_activity_requires_token(monkeypatch):
    monkeypatch.setattr(config, "ADMIN_TOKEN", "admin-secret")
    client = TestClient(app)
    assert client.get('/api/admin/activity').status_code == 401
    assert client.get('/api/admin/activity', headers={"Authorization": "Bearer nope"}).status_code == 401
