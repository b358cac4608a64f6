import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models import TotpEntry  # noqa: E402


def make_entry(**overrides) -> TotpEntry:
    data = {
        "username": "alice@example.com",
        "label_name": "GitHub",
        "secret": "JBSWY3DPEHPK3PXP",
        "algorithm": "SHA1",
        "digits": 6,
        "period_time": 30,
    }
    data.update(overrides)
    return TotpEntry(**data)


@pytest.fixture
def entry():
    return make_entry()


@pytest.fixture
def write_export(tmp_path):
    """Write an export document and return its path"""

    def _write(entries, total_entries=None, export_time="2024-01-01T00:00:00Z"):
        document = {
            "export_time": export_time,
            "total_entries": len(entries) if total_entries is None else total_entries,
            "entries": entries,
        }
        path = tmp_path / "totp.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def github_entry():
    return {
        "username": "alice@example.com",
        "label_name": "GitHub",
        "secret": "JBSWY3DPEHPK3PXP",
        "algorithm": "SHA1",
        "digits": 6,
        "period_time": 30,
    }
