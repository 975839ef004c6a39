from winewithpete.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth).
# Repositories read these attributes at call time, so tests can monkeypatch them.
RECIPES_FILE = DATA_DIR / 'recipes.json'
PACKAGES_FILE = DATA_DIR / 'packages.json'
MEMBERS_FILE = DATA_DIR / 'members.json'
EVENTS_FILE = DATA_DIR / 'events.json'
RSVPS_FILE = DATA_DIR / 'event_rsvps.json'
ESSAYS_FILE = DATA_DIR / 'featured_essays.json'
SUBSCRIBERS_FILE = DATA_DIR / 'newsletter_subscribers.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'PACKAGES_FILE', 'MEMBERS_FILE', 'EVENTS_FILE', 'RSVPS_FILE', 'ESSAYS_FILE',
           'SUBSCRIBERS_FILE']
