"""
Description Mapper

Architectural Intent:
- Translates the pipeline's JSON request payload (camelCase keys) into a
  CreateServerGroupDescription
- Only structure is enforced here; field values pass through untouched and
  are judged by the validation engine
- Unknown keys are ignored
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional, TypeVar

from ecsguard.domain.entities.server_group_description import (
    Capacity,
    CreateServerGroupDescription,
    PlacementStrategy,
    ServiceDiscoveryAssociation,
    ServiceRegistry,
    TargetGroupMapping,
)

T = TypeVar("T")


class DescriptionParseError(ValueError):
    """Raised when a payload cannot be turned into a description at all."""


def _require_mapping(value: Any, path: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise DescriptionParseError(f"{path} must be an object, got {type(value).__name__}")
    return value


def _optional_list(
    payload: Mapping, key: str, build: Callable[[Mapping, str], T]
) -> Optional[tuple[T, ...]]:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise DescriptionParseError(f"{key} must be a list, got {type(value).__name__}")
    return tuple(
        build(_require_mapping(item, f"{key}[{index}]"), f"{key}[{index}]")
        for index, item in enumerate(value)
    )


def _capacity(payload: Mapping) -> Optional[Capacity]:
    value = payload.get("capacity")
    if value is None:
        return None
    value = _require_mapping(value, "capacity")
    return Capacity(min=value.get("min"), max=value.get("max"), desired=value.get("desired"))


def _availability_zones(payload: Mapping) -> Optional[tuple[str, ...]]:
    value = payload.get("availabilityZones")
    if value is None:
        return None
    # Pipelines send {region: [zones]}; the regions are what is counted.
    if isinstance(value, Mapping):
        return tuple(value.keys())
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(value)
    raise DescriptionParseError(
        f"availabilityZones must be a list or object, got {type(value).__name__}"
    )


def _placement_strategy(item: Mapping, path: str) -> PlacementStrategy:
    return PlacementStrategy(type=item.get("type"), field=item.get("field"))


def _service_discovery_association(item: Mapping, path: str) -> ServiceDiscoveryAssociation:
    registry = item.get("registry")
    if registry is not None:
        registry = _require_mapping(registry, f"{path}.registry")
        registry = ServiceRegistry(
            arn=registry.get("arn"), name=registry.get("name"), id=registry.get("id")
        )
    return ServiceDiscoveryAssociation(
        registry=registry,
        container_port=item.get("containerPort"),
        container_name=item.get("containerName"),
    )


def _target_group_mapping(item: Mapping, path: str) -> TargetGroupMapping:
    return TargetGroupMapping(
        target_group=item.get("targetGroup"),
        container_name=item.get("containerName"),
        container_port=item.get("containerPort"),
    )


def _environment_variables(payload: Mapping) -> Optional[dict[str, Any]]:
    value = payload.get("environmentVariables")
    if value is None:
        return None
    return dict(_require_mapping(value, "environmentVariables"))


def _use_task_definition_artifact(payload: Mapping) -> bool:
    value = payload.get("useTaskDefinitionArtifact")
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    # Form-encoded pipelines send the flag as text.
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise DescriptionParseError(
        f"useTaskDefinitionArtifact must be a boolean, got {value!r}"
    )


def description_from_dict(payload: Any) -> CreateServerGroupDescription:
    payload = _require_mapping(payload, "description")
    return CreateServerGroupDescription(
        credentials=payload.get("credentials") or payload.get("account"),
        application=payload.get("application"),
        stack=payload.get("stack"),
        free_form_details=payload.get("freeFormDetails"),
        region=payload.get("region"),
        ecs_cluster_name=payload.get("ecsClusterName"),
        launch_type=payload.get("launchType"),
        capacity=_capacity(payload),
        availability_zones=_availability_zones(payload),
        placement_strategy_sequence=_optional_list(
            payload, "placementStrategySequence", _placement_strategy
        ),
        service_discovery_associations=_optional_list(
            payload, "serviceDiscoveryAssociations", _service_discovery_association
        ),
        use_task_definition_artifact=_use_task_definition_artifact(payload),
        docker_image_address=payload.get("dockerImageAddress"),
        compute_units=payload.get("computeUnits"),
        reserved_memory=payload.get("reservedMemory"),
        target_group=payload.get("targetGroup"),
        target_group_mappings=_optional_list(
            payload, "targetGroupMappings", _target_group_mapping
        ),
        load_balanced_container=payload.get("loadBalancedContainer"),
        container_port=payload.get("containerPort"),
        environment_variables=_environment_variables(payload),
    )
