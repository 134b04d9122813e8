"""
Record and runtime-state models.

A Record is a persisted port-forward definition. A RecordState is the
runtime indicator reported by the forwarding engine for one record.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_LOCAL_ADDRESS, PROTOCOL_TCP, WORKLOAD_POD, WORKLOAD_SERVICE


@dataclass
class Record:
    """A forwardable connection definition."""

    id: Optional[int] = None
    service: str = ""
    namespace: str = "default"
    local_port: int = 0
    remote_port: int = 0
    context: str = ""
    workload_type: str = WORKLOAD_SERVICE  # service, pod, proxy
    protocol: str = PROTOCOL_TCP
    alias: str = ""
    local_address: str = DEFAULT_LOCAL_ADDRESS
    remote_address: str = ""
    kubeconfig: str = ""

    @property
    def display_name(self) -> str:
        return self.alias or self.service

    @property
    def target(self) -> str:
        """kubectl resource target, e.g. 'svc/api' or 'pod/api-0'."""
        if self.workload_type == WORKLOAD_POD:
            return f"pod/{self.service}"
        return f"svc/{self.service}"

    def to_dict(self, include_id: bool = True) -> dict:
        """Convert record to dictionary for JSON serialization."""
        data = {
            "service": self.service,
            "namespace": self.namespace,
            "local_port": self.local_port,
            "remote_port": self.remote_port,
            "context": self.context,
            "workload_type": self.workload_type,
            "protocol": self.protocol,
            "alias": self.alias,
            "local_address": self.local_address,
            "remote_address": self.remote_address,
            "kubeconfig": self.kubeconfig,
        }
        if include_id:
            data = {"id": self.id, **data}
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Record":
        """Create record from dictionary. Unknown keys are ignored."""
        return cls(
            id=data.get("id"),
            service=data.get("service", ""),
            namespace=data.get("namespace", "default"),
            local_port=int(data.get("local_port", 0) or 0),
            remote_port=int(data.get("remote_port", 0) or 0),
            context=data.get("context", ""),
            workload_type=data.get("workload_type", WORKLOAD_SERVICE),
            protocol=data.get("protocol", PROTOCOL_TCP),
            alias=data.get("alias", "") or "",
            local_address=data.get("local_address", DEFAULT_LOCAL_ADDRESS) or DEFAULT_LOCAL_ADDRESS,
            remote_address=data.get("remote_address", "") or "",
            kubeconfig=data.get("kubeconfig", "") or "",
        )


@dataclass(frozen=True)
class RecordState:
    """Whether a given record is currently forwarding."""

    record_id: int
    running: bool = False


def partition_records(records, statuses):
    """Split records into (running, stopped) lists.

    A record is running when a status exists for its id and marks it
    running. Records without an id or without a matching status are
    stopped. Relative order is preserved in both lists.
    """
    # First status reported for an id wins
    first_status = {}
    for status in statuses:
        first_status.setdefault(status.record_id, status.running)
    running = []
    stopped = []
    for record in records:
        if record.id is not None and first_status.get(record.id, False):
            running.append(record)
        else:
            stopped.append(record)
    return running, stopped
