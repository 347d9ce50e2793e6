"""
Create Server Group Description

Architectural Intent:
- Immutable input to the validation engine: one ECS service deployment request
- Every field is optional at the type level; required-ness is a validation
  concern so that malformed requests can still be described and reported on
- Derived views (deployment mode, target group binding) live on the entity so
  rules dispatch on them instead of re-deriving flags

Design Decisions:
- Frozen dataclasses with tuple collections
- availability_zones holds region names; the pipeline's region->zones mapping
  is flattened to its keys by the mapper
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Mapping, Optional


def is_not_blank(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_not_empty(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


class DeploymentMode(Enum):
    """Image-based deploys build the task definition from inputs; artifact-based
    deploys take it from a task definition artifact."""

    IMAGE = auto()
    ARTIFACT = auto()


class TargetGroupBinding(Enum):
    NONE = auto()
    SINGLE = auto()
    MAPPINGS = auto()
    CONFLICT = auto()


@dataclass(frozen=True)
class Capacity:
    min: Optional[int] = None
    max: Optional[int] = None
    desired: Optional[int] = None


@dataclass(frozen=True)
class PlacementStrategy:
    type: Optional[str] = None
    field: Optional[str] = None


@dataclass(frozen=True)
class ServiceRegistry:
    arn: Optional[str] = None
    name: Optional[str] = None
    id: Optional[str] = None


@dataclass(frozen=True)
class ServiceDiscoveryAssociation:
    registry: Optional[ServiceRegistry] = None
    container_port: Optional[int] = None
    container_name: Optional[str] = None


@dataclass(frozen=True)
class TargetGroupMapping:
    target_group: Optional[str] = None
    container_name: Optional[str] = None
    container_port: Optional[int] = None

    @property
    def has_target_group(self) -> bool:
        return is_not_blank(self.target_group)

    @property
    def has_container_name(self) -> bool:
        return is_not_blank(self.container_name)


@dataclass(frozen=True)
class CreateServerGroupDescription:
    credentials: Optional[str] = None
    application: Optional[str] = None
    stack: Optional[str] = None
    free_form_details: Optional[str] = None
    region: Optional[str] = None
    ecs_cluster_name: Optional[str] = None
    launch_type: Optional[str] = None
    capacity: Optional[Capacity] = None
    availability_zones: Optional[tuple[str, ...]] = None
    placement_strategy_sequence: Optional[tuple[PlacementStrategy, ...]] = None
    service_discovery_associations: Optional[tuple[ServiceDiscoveryAssociation, ...]] = None
    use_task_definition_artifact: bool = False
    docker_image_address: Optional[str] = None
    compute_units: Optional[int] = None
    reserved_memory: Optional[int] = None
    target_group: Optional[str] = None
    target_group_mappings: Optional[tuple[TargetGroupMapping, ...]] = None
    load_balanced_container: Optional[str] = None
    container_port: Optional[int] = None
    environment_variables: Optional[Mapping[str, Any]] = field(default=None, hash=False)

    @property
    def deployment_mode(self) -> DeploymentMode:
        if self.use_task_definition_artifact:
            return DeploymentMode.ARTIFACT
        return DeploymentMode.IMAGE

    @property
    def has_target_group(self) -> bool:
        return is_not_blank(self.target_group)

    @property
    def has_load_balanced_container(self) -> bool:
        return is_not_blank(self.load_balanced_container)

    @property
    def target_group_binding(self) -> TargetGroupBinding:
        # Conflict uses non-empty semantics: a whitespace-only target group
        # still collides with a mapping list.
        if self.target_group_mappings:
            if is_not_empty(self.target_group):
                return TargetGroupBinding.CONFLICT
            return TargetGroupBinding.MAPPINGS
        if self.has_target_group:
            return TargetGroupBinding.SINGLE
        return TargetGroupBinding.NONE
