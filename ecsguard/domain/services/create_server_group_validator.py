"""
Create Server Group Description Validator

Architectural Intent:
- Validation engine for CreateServerGroupDescription
- Walks independent rule groups in a fixed order; a failing group never stops
  later groups, so one pass reports every problem with the description
- Pure: each validate() call allocates its own FieldErrors sink, and the
  allow-lists and reserved variable names are read-only module constants

Domain Logic:
- Credentials and capacity are delegated to injected collaborators
- Image-based and artifact-based deploys have separate required-field rules,
  selected by DeploymentMode
- A single target group and a list of target group mappings are mutually
  exclusive ways of load balancing the service
"""

import logging
from collections.abc import Iterable, Mapping, Sized
from typing import Callable

from ecsguard.domain.entities.server_group_description import (
    CreateServerGroupDescription,
    DeploymentMode,
    PlacementStrategy,
    ServiceDiscoveryAssociation,
    TargetGroupBinding,
    TargetGroupMapping,
)
from ecsguard.domain.ports.capacity_port import CapacityValidatorPort
from ecsguard.domain.ports.credentials_port import CredentialsValidatorPort
from ecsguard.domain.services.checks import (
    require_disjoint,
    require_in_range,
    require_member,
    require_non_null,
    require_paired,
)
from ecsguard.domain.services.field_errors import FieldErrors
from ecsguard.domain.value_objects.field_error import (
    FieldError,
    INVALID,
    ITEM_INVALID,
    MUST_HAVE_ONLY_ONE,
    NOT_NULLABLE,
)
from ecsguard.domain.value_objects.placement_strategy_type import PlacementStrategyType

logger = logging.getLogger(__name__)

DEFAULT_ERROR_KEY = "createServerGroupDescription"

RESERVED_ENVIRONMENT_VARIABLES = frozenset({"SERVER_GROUP", "CLOUD_STACK", "CLOUD_DETAIL"})

MIN_PORT = 0
MAX_PORT = 65535

TARGET_GROUP_CONFLICT_MESSAGE = (
    "TargetGroup cannot be specified when TargetGroupMapping.TargetGroup is "
    "specified. Please use TargetGroupMapping"
)


def _is_sequence(value) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping))


def _validate_image_mode(
    description: CreateServerGroupDescription, errors: FieldErrors
) -> None:
    require_non_null(errors, description.docker_image_address, "dockerImageAddress")
    if require_non_null(errors, description.compute_units, "computeUnits"):
        require_in_range(errors, description.compute_units, 0, None, "computeUnits")
    if require_non_null(errors, description.reserved_memory, "reservedMemory"):
        require_in_range(errors, description.reserved_memory, 0, None, "reservedMemory")


def _validate_artifact_mode(
    description: CreateServerGroupDescription, errors: FieldErrors
) -> None:
    # A load balanced service built from an artifact must name the container
    # to load balance on.
    require_paired(
        errors,
        description.has_target_group,
        description.has_load_balanced_container,
        "targetGroup",
        "loadBalancedContainer",
    )


MODE_RULES: dict[DeploymentMode, Callable[[CreateServerGroupDescription, FieldErrors], None]] = {
    DeploymentMode.IMAGE: _validate_image_mode,
    DeploymentMode.ARTIFACT: _validate_artifact_mode,
}


class CreateServerGroupDescriptionValidator:
    def __init__(
        self,
        credentials_validator: CredentialsValidatorPort,
        capacity_validator: CapacityValidatorPort,
        error_key: str = DEFAULT_ERROR_KEY,
    ) -> None:
        self._credentials_validator = credentials_validator
        self._capacity_validator = capacity_validator
        self._error_key = error_key

    @property
    def error_key(self) -> str:
        return self._error_key

    def validate(self, description: CreateServerGroupDescription) -> tuple[FieldError, ...]:
        errors = FieldErrors(self._error_key)

        self._credentials_validator.validate(description.credentials, "credentials", errors)
        self._capacity_validator.validate(description.capacity, errors)

        self._validate_availability_zones(description, errors)
        self._validate_placement_strategies(description, errors)

        require_non_null(errors, description.application, "application")
        require_non_null(errors, description.ecs_cluster_name, "ecsClusterName")

        self._validate_service_discovery(description, errors)

        MODE_RULES[description.deployment_mode](description, errors)

        self._validate_container_port(description, errors)
        self._validate_target_group_mappings(description, errors)
        self._validate_environment_variables(description, errors)

        logger.debug(
            "Validated server group for application %s: %d finding(s)",
            description.application,
            len(errors),
        )
        return errors.errors()

    def _validate_availability_zones(
        self, description: CreateServerGroupDescription, errors: FieldErrors
    ) -> None:
        zones = description.availability_zones
        if not require_non_null(errors, zones, "availabilityZones"):
            return
        if not isinstance(zones, Sized) or len(zones) != 1:
            errors.reject("availabilityZones", MUST_HAVE_ONLY_ONE)

    def _validate_placement_strategies(
        self, description: CreateServerGroupDescription, errors: FieldErrors
    ) -> None:
        strategies = description.placement_strategy_sequence
        if not require_non_null(errors, strategies, "placementStrategySequence"):
            return
        if not _is_sequence(strategies):
            errors.reject("placementStrategySequence", INVALID)
            return

        for strategy in strategies:
            if not isinstance(strategy, PlacementStrategy):
                errors.reject("placementStrategySequence.type", INVALID)
                continue
            try:
                strategy_type = PlacementStrategyType.from_value(strategy.type)
            except ValueError:
                errors.reject("placementStrategySequence.type", INVALID)
                continue

            match strategy_type:
                case PlacementStrategyType.RANDOM:
                    pass
                case PlacementStrategyType.SPREAD:
                    require_member(
                        errors,
                        strategy.field,
                        strategy_type.allowed_fields,
                        "placementStrategySequence.spread",
                        allow_absent=False,
                    )
                case PlacementStrategyType.BINPACK:
                    require_member(
                        errors,
                        strategy.field,
                        strategy_type.allowed_fields,
                        "placementStrategySequence.binpack",
                        allow_absent=False,
                    )

    def _validate_service_discovery(
        self, description: CreateServerGroupDescription, errors: FieldErrors
    ) -> None:
        associations = description.service_discovery_associations
        if associations is None:
            return
        if not _is_sequence(associations):
            errors.reject("serviceDiscoveryAssociations", ITEM_INVALID)
            return
        for association in associations:
            if (
                not isinstance(association, ServiceDiscoveryAssociation)
                or association.registry is None
            ):
                errors.reject("serviceDiscoveryAssociations", ITEM_INVALID)

    def _validate_container_port(
        self, description: CreateServerGroupDescription, errors: FieldErrors
    ) -> None:
        if description.container_port is not None:
            require_in_range(errors, description.container_port, MIN_PORT, MAX_PORT, "containerPort")
        elif description.has_target_group:
            errors.reject("containerPort", NOT_NULLABLE)

    def _validate_target_group_mappings(
        self, description: CreateServerGroupDescription, errors: FieldErrors
    ) -> None:
        if not description.target_group_mappings:
            return
        if not _is_sequence(description.target_group_mappings):
            errors.reject("targetGroupMappings", INVALID)
            return

        if description.target_group_binding is TargetGroupBinding.CONFLICT:
            errors.reject("targetGroup", INVALID, TARGET_GROUP_CONFLICT_MESSAGE)

        for mapping in description.target_group_mappings:
            if not isinstance(mapping, TargetGroupMapping):
                errors.reject("targetGroupMappings", ITEM_INVALID)
                continue
            self._validate_target_group_mapping(description.deployment_mode, mapping, errors)

    def _validate_target_group_mapping(
        self, mode: DeploymentMode, mapping: TargetGroupMapping, errors: FieldErrors
    ) -> None:
        if mode is DeploymentMode.ARTIFACT:
            require_paired(
                errors,
                mapping.has_target_group,
                mapping.has_container_name,
                "targetGroupMappings.targetGroup",
                "targetGroupMappings.containerName",
            )

        if mapping.container_port is not None:
            require_in_range(
                errors,
                mapping.container_port,
                MIN_PORT,
                MAX_PORT,
                "targetGroupMappings.containerPort",
            )
        elif mapping.has_target_group:
            errors.reject("targetGroupMappings.containerPort", NOT_NULLABLE)

    def _validate_environment_variables(
        self, description: CreateServerGroupDescription, errors: FieldErrors
    ) -> None:
        variables = description.environment_variables
        if variables is None:
            return
        if not isinstance(variables, Mapping):
            errors.reject("environmentVariables", INVALID)
            return
        require_disjoint(
            errors, variables.keys(), RESERVED_ENVIRONMENT_VARIABLES, "environmentVariables"
        )
