import json

import pytest


class FakeClient:
    """Records calls and translates from a fixed table (default: upper-case)."""

    def __init__(self, table=None, fail=()):
        self.table = table or {}
        self.fail = set(fail)
        self.calls = []

    def translate(self, text, target_language):
        self.calls.append((text, target_language))
        if text in self.fail:
            return text
        return self.table.get(text, f"{text.upper()}@{target_language}")

    def close(self):
        pass


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        return path

    return _write
