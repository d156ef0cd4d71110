import json
from pathlib import Path
import sys

import pytest

# Put the repository root on the import path regardless of where pytest runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def make_user(**overrides):
    user = {
        "id": 1,
        "first_name": "Ann",
        "last_name": "Lee",
        "email": "a@x.com",
        "company_id": 1,
        "email_status": True,
        "active_status": True,
        "tokens": 5,
    }
    user.update(overrides)
    return user


def make_company(**overrides):
    company = {"id": 1, "name": "Acme", "top_up": 10, "email_status": True}
    company.update(overrides)
    return company


@pytest.fixture()
def acme_users():
    return [
        make_user(),
        make_user(
            id=2,
            first_name="Bo",
            last_name="Ng",
            email="b@x.com",
            email_status=False,
            tokens=20,
        ),
    ]


@pytest.fixture()
def acme_companies():
    return [make_company()]


@pytest.fixture()
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
