import pytest
from fastapi.testclient import TestClient
from winewithpete.api.api_run import app
from winewithpete.api.routes import metadata as metadata_routes
from winewithpete.infra.Subscriber_Repository import SubscriberRepository
from winewithpete.utilities.errors import MetadataFetchError
from winewithpete.logic.metadata.opengraph import OGMetadata


@pytest.fixture
def client():
    return TestClient(app)


def test_upcoming_events(client):
    resp = client.get('/api/events')
    assert resp.status_code == 200
    assert [e['id'] for e in resp.json()['events']] == ['evt-salon-2030', 'evt-open-fire-2030']


def test_rsvp_flow(client, data_copy):
    body = {"eventId": "evt-open-fire-2030", "email": "guest@example.com", "name": "Gus <b>", "notes": "bringing a Gamay"}
    resp = client.post('/api/events/rsvp', json=body)
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data['success'] is True
    assert data['data']['name'] == 'Gus b'
    assert data['data']['status'] == 'pending'

    again = client.post('/api/events/rsvp', json=body)
    assert again.status_code == 409
    assert again.json()['detail'] == 'You have already RSVPed for this event'


def test_rsvp_errors(client, data_copy):
    full = client.post('/api/events/rsvp', json={"eventId": "evt-salon-2030", "email": "a@b.co", "name": "A"})
    assert full.status_code == 409
    missing = client.post('/api/events/rsvp', json={"eventId": "evt-nope", "email": "a@b.co", "name": "A"})
    assert missing.status_code == 404
    bad_email = client.post('/api/events/rsvp', json={"eventId": "evt-open-fire-2030", "email": "nope", "name": "A"})
    assert bad_email.status_code == 422
    no_name = client.post('/api/events/rsvp', json={"eventId": "evt-open-fire-2030", "email": "a@b.co"})
    assert no_name.status_code == 422


def test_newsletter_subscribe(client, data_copy):
    resp = client.post('/api/newsletter/subscribe', json={"email": "Reader@Example.com"})
    assert resp.status_code == 200
    assert resp.json()['data']['email'] == 'reader@example.com'
    dup = client.post('/api/newsletter/subscribe', json={"email": "reader@example.com", "name": "Rae"})
    assert dup.status_code == 409
    assert client.post('/api/newsletter/subscribe', json={}).status_code == 422


def test_og_metadata_invalid_url(client):
    resp = client.post('/api/og-metadata', json={"url": "not-a-url"})
    assert resp.status_code == 400
    assert resp.json()['detail'] == 'Invalid URL format'
    assert client.post('/api/og-metadata', json={}).status_code == 422


def test_og_metadata_success(client, monkeypatch):
    async def fake_fetch(url):
        return OGMetadata(title="Fire", url=url)

    monkeypatch.setattr(metadata_routes, 'fetch_og_metadata', fake_fetch)
    resp = client.post('/api/og-metadata', json={"url": "https://example.com/essay"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "metadata": {"title": "Fire", "url": "https://example.com/essay"}}


def test_og_metadata_upstream_status_passthrough(client, monkeypatch):
    async def failing_fetch(url):
        raise MetadataFetchError("Failed to fetch URL: 404", status_code=404)

    monkeypatch.setattr(metadata_routes, 'fetch_og_metadata', failing_fetch)
    resp = client.post('/api/og-metadata', json={"url": "https://example.com/gone"})
    assert resp.status_code == 404


def test_essays_feed(client):
    resp = client.get('/api/essays')
    assert resp.status_code == 200
    data = resp.json()
    assert data['success'] is True
    assert [e['id'] for e in data['data']] == ['ess-why-fire', 'ess-slow-conversation']
    featured = client.get('/api/essays?featured=true').json()['data']
    assert [e['title'] for e in featured] == ['Why We Cook Over Fire']


def test_gathering_interest(client, data_copy):
    body = {"email": "Guest@Example.com", "name": "Gus <i>", "location": "  Bend, OR ", "interestType": "collaborate"}
    resp = client.post('/api/gatherings/interest', json=body)
    assert resp.status_code == 200, resp.text
    assert resp.json()['success'] is True

    stored = SubscriberRepository().list_active()
    assert [(s.email, s.name) for s in stored] == [("guest@example.com", "Gus i")]
    interest = stored[0].preferences['gathering_interest']
    assert interest['interest_type'] == 'collaborate'
    assert interest['location'] == 'Bend, OR'

    # a second submission updates the same subscriber
    again = client.post('/api/gatherings/interest', json={"email": "guest@example.com", "name": "Gus"})
    assert again.status_code == 200
    stored = SubscriberRepository().list_active()
    assert len(stored) == 1
    assert stored[0].preferences['gathering_interest']['interest_type'] == 'attend'


def test_gathering_interest_validation(client, data_copy):
    bad_type = client.post('/api/gatherings/interest', json={"email": "a@b.co", "name": "A", "interestType": "cater"})
    assert bad_type.status_code == 422
    assert client.post('/api/gatherings/interest', json={"email": "nope", "name": "A"}).status_code == 422
    assert client.post('/api/gatherings/interest', json={"email": "a@b.co"}).status_code == 422
    too_far = client.post('/api/gatherings/interest', json={"email": "a@b.co", "name": "A", "location": "x" * 201})
    assert too_far.status_code == 422
    assert SubscriberRepository().list_active() == []
