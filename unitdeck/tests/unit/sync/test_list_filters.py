"""Tests for list search, status filters and tallies."""

from __future__ import annotations

import pytest

from unitdeck.constants.enums import ContainerStatusFilter, ServiceStatusFilter
from unitdeck.models.core.container_info import ContainerInfo
from unitdeck.models.core.service_info import ServiceInfo
from unitdeck.sync.list_filters import (
    container_status_counts,
    filter_containers,
    filter_services,
    service_status_counts,
)


@pytest.fixture
def services() -> list[ServiceInfo]:
    return [
        ServiceInfo(name="nginx.service", description="Web server", active_state="active", sub_state="running"),
        ServiceInfo(name="backup.service", description="Nightly backup", active_state="active", sub_state="exited"),
        ServiceInfo(name="cups.service", description="Printing", active_state="inactive", sub_state="dead"),
        ServiceInfo(name="broken.service", description="Web hook", active_state="failed", sub_state="failed"),
    ]


@pytest.fixture
def containers() -> list[ContainerInfo]:
    return [
        ContainerInfo.model_validate({"id": "1", "name": "/web", "image": "nginx", "status": {"running": True, "state": "running"}}),
        ContainerInfo.model_validate({"id": "2", "name": "/db", "image": "postgres", "status": {"running": False, "state": "exited"}}),
        ContainerInfo.model_validate({"id": "3", "name": "/job", "image": "busybox", "status": {"running": False, "state": "created"}}),
    ]


@pytest.mark.unit
class TestServiceFilters:
    """Tests for service filtering."""

    def test_counts(self, services) -> None:
        assert service_status_counts(services) == {"running": 1, "active": 1, "inactive": 1, "failed": 1}

    def test_search_matches_name_or_description(self, services) -> None:
        assert [s.name for s in filter_services(services, "WEB")] == ["nginx.service", "broken.service"]
        assert [s.name for s in filter_services(services, "backup")] == ["backup.service"]

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (ServiceStatusFilter.RUNNING, ["nginx.service"]),
            (ServiceStatusFilter.ACTIVE, ["nginx.service", "backup.service"]),
            (ServiceStatusFilter.INACTIVE, ["cups.service"]),
            (ServiceStatusFilter.FAILED, ["broken.service"]),
            (None, ["nginx.service", "backup.service", "cups.service", "broken.service"]),
        ],
    )
    def test_status(self, services, status, expected) -> None:
        assert [s.name for s in filter_services(services, "", status)] == expected

    def test_search_and_status_combine(self, services) -> None:
        assert filter_services(services, "web", ServiceStatusFilter.FAILED)[0].name == "broken.service"


@pytest.mark.unit
class TestContainerFilters:
    """Tests for container filtering."""

    def test_counts(self, containers) -> None:
        assert container_status_counts(containers) == {"running": 1, "exited": 1, "created": 1}

    def test_search_matches_name_or_image(self, containers) -> None:
        assert [c.id for c in filter_containers(containers, "postgres")] == ["2"]
        assert [c.id for c in filter_containers(containers, "job")] == ["3"]

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (ContainerStatusFilter.RUNNING, ["1"]),
            (ContainerStatusFilter.EXITED, ["2"]),
            (ContainerStatusFilter.CREATED, ["3"]),
        ],
    )
    def test_status(self, containers, status, expected) -> None:
        assert [c.id for c in filter_containers(containers, status=status)] == expected
