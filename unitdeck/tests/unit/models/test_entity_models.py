"""Tests for service and container models."""

from __future__ import annotations

from typing import Any

import pytest

from unitdeck.models.core.container_info import ContainerInfo, ContainerListInfo
from unitdeck.models.core.service_info import (
    CPU_MEASURING,
    ServiceDetailsInfo,
    ServiceInfo,
    ServiceListInfo,
)


@pytest.mark.unit
class TestServiceInfo:
    """Tests for ServiceInfo."""

    def test_camel_case_fields(self, make_service) -> None:
        service = ServiceInfo.model_validate(make_service("nginx.service"))
        assert service.load_state == "loaded"
        assert service.active_state == "active"
        assert service.sub_state == "running"
        assert service.memory_usage == 1048576
        assert service.entity_id == "nginx.service"

    @pytest.mark.parametrize(
        ("active", "sub", "expected"),
        [
            ("active", "running", True),
            ("active", "exited", False),
            ("inactive", "dead", False),
            ("failed", "failed", False),
        ],
    )
    def test_is_running(self, make_service, active: str, sub: str, expected: bool) -> None:
        service = ServiceInfo.model_validate(
            make_service("a.service", activeState=active, subState=sub)
        )
        assert service.is_running is expected

    def test_measuring_sentinel(self, make_service) -> None:
        service = ServiceInfo.model_validate(make_service("a.service", cpuUsage=CPU_MEASURING))
        assert service.cpu_usage == CPU_MEASURING

    def test_missing_metrics_are_none(self) -> None:
        service = ServiceInfo.model_validate({"name": "a.service", "cpuUsage": None})
        assert service.cpu_usage is None
        assert service.memory_usage is None


@pytest.mark.unit
class TestServiceDetailsInfo:
    """Tests for ServiceDetailsInfo."""

    def test_detail_aliases_and_null_lists(self, make_service) -> None:
        payload: dict[str, Any] = {
            "service": make_service("nginx.service"),
            "mainPID": 1234,
            "cGroup": "/system.slice/nginx.service",
            "ioReadBytes": 10,
            "ipEgressBytes": 20,
            "tasksLimit": 100,
            "cpuTimeNSec": 5_000_000,
            "dropIn": None,
            "docs": ["man:nginx(8)"],
        }
        details = ServiceDetailsInfo.model_validate(payload)
        assert details.main_pid == 1234
        assert details.c_group == "/system.slice/nginx.service"
        assert details.io_read_bytes == 10
        assert details.ip_egress_bytes == 20
        assert details.tasks_limit == 100
        assert details.cpu_time_nsec == 5_000_000
        assert details.drop_in == []
        assert details.docs == ["man:nginx(8)"]

    def test_proxies_service_state(self, make_service) -> None:
        details = ServiceDetailsInfo.model_validate({"service": make_service("x.service")})
        assert details.entity_id == "x.service"
        assert details.is_running
        assert details.cpu_usage == 1.5
        assert details.memory_usage == 1048576


@pytest.mark.unit
class TestServiceListInfo:
    """Tests for ServiceListInfo."""

    def test_count_follows_list(self, make_service) -> None:
        service_list = ServiceListInfo.model_validate(
            {"services": [make_service("a.service"), make_service("b.service")], "count": 7}
        )
        assert service_list.count == 2

    def test_null_services(self) -> None:
        service_list = ServiceListInfo.model_validate({"services": None, "count": 0})
        assert service_list.services == []
        assert service_list.count == 0

    def test_get(self, make_service) -> None:
        service_list = ServiceListInfo.model_validate({"services": [make_service("a.service")]})
        assert service_list.get("a.service") is not None
        assert service_list.get("missing.service") is None


@pytest.mark.unit
class TestContainerInfo:
    """Tests for container models."""

    def test_structured_status(self, make_container) -> None:
        container = ContainerInfo.model_validate(
            make_container(
                "abc123",
                status={
                    "running": False,
                    "state": "exited",
                    "exitCode": 137,
                    "oomKilled": True,
                    "finishedAt": "2024-01-01T00:00:00Z",
                },
            )
        )
        assert not container.is_running
        assert container.status.state == "exited"
        assert container.status.exit_code == 137
        assert container.status.oom_killed
        assert container.status.finished_at == "2024-01-01T00:00:00Z"

    def test_display_name_strips_slash(self, make_container) -> None:
        container = ContainerInfo.model_validate(make_container("abc123"))
        assert container.display_name == "abc123-name"
        assert container.entity_id == "abc123"

    def test_networks_and_mounts(self, make_container) -> None:
        container = ContainerInfo.model_validate(
            make_container(
                "abc123",
                networks={"bridge": {"ipAddress": "172.17.0.2", "gateway": "172.17.0.1"}},
                mounts=[{"source": "/data", "destination": "/var/lib/data", "mode": "rw"}],
                labels={"app": "web"},
            )
        )
        assert container.networks["bridge"].ip_address == "172.17.0.2"
        assert container.mounts[0].destination == "/var/lib/data"
        assert container.labels == {"app": "web"}

    def test_null_collections_use_defaults(self, make_container) -> None:
        container = ContainerInfo.model_validate(make_container("abc123", environment=None))
        assert container.networks == {}
        assert container.mounts == []
        assert container.environment == []

    def test_list_count_and_get(self, make_container) -> None:
        containers = ContainerListInfo.model_validate(
            {"containers": [make_container("a"), make_container("b")], "count": 2}
        )
        assert containers.count == 2
        assert containers.get("b") is not None
        assert containers.get("c") is None
