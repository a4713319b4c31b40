from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from orgadmin import (
    AdminConfig,
    BranchInput,
    DashboardSnapshot,
    OrgAdminClient,
    OrgAdminError,
    OrgAdminStatusError,
    OrgAdminValidationError,
)


@dataclass
class FakeOrgBackend:
    contacts: list[dict[str, Any]] = field(
        default_factory=lambda: [
            {"_id": f"c{i}", "name": f"N{i}", "subject": "Hello", "createdAt": "2026-02-01T00:00:00Z"}
            for i in range(2)
        ]
    )
    branches: list[dict[str, Any]] = field(
        default_factory=lambda: [{"_id": f"b{i}", "name": f"Branch {i}", "manager": "M"} for i in range(7)]
    )
    routes: list[dict[str, Any]] = field(
        default_factory=lambda: [{"_id": "r1", "name": "Coastal", "district": "Galle", "managerName": "K"}]
    )
    admins: set[str] = field(default_factory=set)
    fail_paths: set[str] = field(default_factory=set)
    calls: dict[str, int] = field(default_factory=dict)

    def _record_call(self, method: str, path: str) -> None:
        key = f"{method} {path}"
        self.calls[key] = self.calls.get(key, 0) + 1

    async def request_json(self, method: str, path: str, *, payload: Any = None) -> Any:
        self._record_call(method, path)

        if path in self.fail_paths:
            raise OrgAdminStatusError(f"HTTP 500 from {path}", status_code=500, endpoint=path)

        if (method, path) == ("GET", "/ContactMessages"):
            return self.contacts
        if (method, path) == ("GET", "/branches"):
            return self.branches
        if (method, path) == ("GET", "/roots"):
            return self.routes
        if method == "DELETE" and path.startswith("/branches/"):
            branch_id = path.rsplit("/", 1)[1]
            if not any(b["_id"] == branch_id for b in self.branches):
                raise OrgAdminStatusError("HTTP 404", status_code=404, endpoint=path, payload={"message": "Not found"})
            self.branches = [b for b in self.branches if b["_id"] != branch_id]
            return None
        if (method, path) == ("POST", "/branches"):
            record = {**payload, "_id": "b-new"}
            self.branches.append(record)
            return {"message": "Branch created", "branch": record}
        if (method, path) == ("POST", "/admin/signup"):
            if payload["email"] in self.admins:
                raise OrgAdminStatusError(
                    "HTTP 400", status_code=400, endpoint=path, payload={"error": "Email already registered"}
                )
            self.admins.add(payload["email"])
            return {"message": "Admin created"}

        raise AssertionError(f"Unexpected request: {method} {path}")


@pytest.fixture
def config() -> AdminConfig:
    return AdminConfig(base_url="https://api.example.org", signup_redirect_delay=0.0)


@pytest.fixture
def backend(monkeypatch: pytest.MonkeyPatch) -> FakeOrgBackend:
    fake = FakeOrgBackend()

    async def fake_request_json(_self: Any, method: str, path: str, *, payload: Any = None) -> Any:
        return await fake.request_json(method, path, payload=payload)

    monkeypatch.setattr("orgadmin._transport.HttpTransport.request_json", fake_request_json)
    return fake


@pytest.mark.asyncio
async def test_dashboard_through_client(config: AdminConfig, backend: FakeOrgBackend) -> None:
    async with OrgAdminClient(config) as client:
        snapshot = await client.dashboard().activate()

    assert snapshot.contacts.count == 2
    assert snapshot.branches.count == 7
    assert [b.id for b in snapshot.branches.recent] == ["b0", "b1", "b2", "b3", "b4"]
    assert snapshot.routes.recent[0].manager_name == "K"
    assert backend.calls["GET /roots"] == 1


@pytest.mark.asyncio
async def test_dashboard_failure_through_client(config: AdminConfig, backend: FakeOrgBackend) -> None:
    backend.fail_paths.add("/ContactMessages")

    async with OrgAdminClient(config) as client:
        dashboard = client.dashboard()
        snapshot = await dashboard.activate()

    assert snapshot == DashboardSnapshot.empty()
    assert dashboard.last_error is not None


@pytest.mark.asyncio
async def test_branch_page_flow(config: AdminConfig, backend: FakeOrgBackend) -> None:
    async with OrgAdminClient(config) as client:
        page = client.branch_manager(confirm=lambda _b: True)
        await page.list()
        assert await page.delete("b3") is True
        # Stale delete: someone else removed it already.
        backend.branches = [b for b in backend.branches if b["_id"] != "b4"]
        assert await page.delete("b4") is False
        created = await page.create(BranchInput(name="Lakeside"))

    assert created is not None and created.id == "b-new"
    ids = [b.id for b in page.branches]
    assert "b3" not in ids
    assert "b4" in ids
    assert ids[-1] == "b-new"
    assert [n.message for n in page.notices] == [
        "Branch deleted successfully",
        "Failed to delete branch",
        "Branch added successfully",
    ]


@pytest.mark.asyncio
async def test_registration_through_client(config: AdminConfig, backend: FakeOrgBackend) -> None:
    async with OrgAdminClient(config) as client:
        form = client.registration()
        first = await form.register("admin@example.org", "pw")
        second = await form.register("admin@example.org", "pw")

    assert first.message == "Admin created"
    assert second.error == "Email already registered"


@pytest.mark.asyncio
async def test_client_methods_raise_typed_errors(config: AdminConfig, backend: FakeOrgBackend) -> None:
    backend.admins.add("admin@example.org")
    async with OrgAdminClient(config) as client:
        with pytest.raises(OrgAdminValidationError, match="Email already registered"):
            await client.signup_admin("admin@example.org", "pw")
        with pytest.raises(OrgAdminStatusError) as exc_info:
            await client.delete_branch("missing")

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_client_requires_context_manager(config: AdminConfig) -> None:
    client = OrgAdminClient(config)

    with pytest.raises(OrgAdminError, match="not initialized"):
        await client.get_branches()
    with pytest.raises(OrgAdminError):
        client.dashboard()
