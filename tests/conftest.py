from __future__ import annotations

import io
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest
from rich.console import Console

from provisioner.errors import ApiError


class FakeClient:
    """Records calls and replies from a list of (path prefix, response) rules."""

    def __init__(self, responses: Dict[str, Any], fail_on: Optional[Callable[[str, str], bool]] = None):
        self.responses = responses
        self.fail_on = fail_on
        self.calls: List[Tuple[str, Dict[str, Any], str]] = []

    def __call__(self, path: str, payload: Dict[str, Any], method: str = "post") -> Dict[str, Any]:
        self.calls.append((path, payload, method))
        if self.fail_on and self.fail_on(path, method):
            raise ApiError(f"{method.upper()} {path} failed", method=method, path=path, status=500)
        return dict(self.responses.get(path, {}))

    @property
    def paths(self) -> List[str]:
        return [call[0] for call in self.calls]


def scripted(*answers: str) -> Callable[[str], str]:
    remaining = list(answers)
    asked: List[str] = []

    def ask(prompt: str) -> str:
        asked.append(prompt)
        return remaining.pop(0)

    ask.asked = asked  # type: ignore[attr-defined]
    return ask


DEMO_RESPONSES = {
    "/api/apps": {"id": "A1"},
    "/api/apps/widgets": {"id": "W1"},
    "/api/storage/buckets/W1": {},
    "/api/storage/buckets/W1/entry": {},
    "/api/apps/widgets/W1": {"id": "W1", "title": "Demo"},
}


@pytest.fixture
def demo_client() -> FakeClient:
    return FakeClient(DEMO_RESPONSES)


@pytest.fixture
def quiet_console() -> Console:
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "us:\n"
        "  url: https://us.example.com/cmp/\n"
        "  token: secret\n"
        "eu:\n"
        "  url: https://eu.example.com/cmp\n"
        "  username: admin\n"
        "  password: hunter2\n"
        "  verify_ssl: false\n"
    )
    return path
