"""
Pytest fixtures for the Kickstarter Graveyard tests.

Provides:
    sample_records   — list of raw JSON-style dicts covering every filter path
    sample_projects  — the same records as Project instances
    dataset_file     — sample_records written to a temporary graveyard.json
    ready_loader     — a DatasetLoader already resolved with sample_projects
    client           — TestClient for an app serving dataset_file
"""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fastapi.testclient import TestClient  # noqa: E402

from api.app import create_app  # noqa: E402
from graveyard import DatasetLoader, Project  # noqa: E402


SAMPLE_RECORDS = [
    {
        "name": "Zano",
        "kickstarter_url": "https://www.kickstarter.com/projects/torquing/zano",
        "image_url": "https://example.com/zano.jpg",
        "amount_raised": 3400000,
        "backers": 12075,
        "goal": 180000,
        "funded_date": "2015-01-06",
        "last_update": "Company liquidated",
        "category": "Technology/Drones",
        "failure_reason": "Could not deliver the advertised flight time.",
        "sources": ["https://medium.com/kickstarter/zano", "https://en.wikipedia.org/wiki/Zano"],
        "tags": ["Technically Impossible", "Company Shutdown"],
    },
    {
        "name": "Slim Wallet",
        "kickstarter_url": "https://www.kickstarter.com/projects/slim/wallet",
        "image_url": "",
        "amount_raised": 50000,
        "backers": 200,
        "goal": 20000,
        "funded_date": "2019-01-01",
        "last_update": "No updates since 2020",
        "category": "Hardware/Wallets",
        "failure_reason": "Creator vanished after funding.",
        "sources": ["https://www.kicktraq.com/projects/slim/wallet/"],
        "tags": ["Fraud/Scam", "Never Delivered"],
    },
    {
        "name": "Pocket Projector",
        "kickstarter_url": "https://www.kickstarter.com/projects/pp/pocket-projector",
        "image_url": "",
        "amount_raised": 1200000,
        "backers": 50,
        "goal": 100000,
        "funded_date": "2020-06-15",
        "last_update": "Refunds promised",
        "category": "Technology/Gadgets",
        "failure_reason": "Tooling costs exceeded the budget; the WALLET-sized model was cancelled.",
        "sources": [],
        "tags": ["Ran Out of Money"],
    },
    {
        "name": "Band Tracker",
        "kickstarter_url": "https://www.kickstarter.com/projects/band/tracker",
        "image_url": "",
        "amount_raised": 50000,
        "backers": 900,
        "goal": 40000,
        "funded_date": "sometime in 2018",
        "last_update": "Shipping halted",
        "category": "Hardware/Wearables",
        "failure_reason": "Shipping partner went bankrupt.",
        "sources": ["not a url"],
        # no "tags" key at all
    },
]


@pytest.fixture()
def sample_records() -> list[dict]:
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture()
def sample_projects(sample_records) -> list[Project]:
    return [Project.from_dict(r) for r in sample_records]


@pytest.fixture()
def dataset_file(tmp_path, sample_records) -> Path:
    path = tmp_path / "graveyard.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path


@pytest.fixture()
def ready_loader(sample_projects) -> DatasetLoader:
    return DatasetLoader.from_records(sample_projects)


@pytest.fixture()
def client(dataset_file):
    """App serving the sample dataset; the context manager runs the lifespan load."""
    app = create_app(data_path=dataset_file)
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture()
def failed_client(tmp_path):
    """App whose dataset path does not exist."""
    app = create_app(data_path=tmp_path / "missing.json")
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
