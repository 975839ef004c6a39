import shutil

import pytest
from winewithpete.infra import paths


@pytest.fixture
def data_copy(tmp_path, monkeypatch):
    """Point every repository at a scratch copy of the seed data (don't alter the real files)."""
    for name in ('RECIPES_FILE', 'PACKAGES_FILE', 'MEMBERS_FILE', 'EVENTS_FILE', 'RSVPS_FILE', 'ESSAYS_FILE',
                 'SUBSCRIBERS_FILE'):
        source = getattr(paths, name)
        target = tmp_path / source.name
        shutil.copy(source, target)
        monkeypatch.setattr(paths, name, target)
    return tmp_path
