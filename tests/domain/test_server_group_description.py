"""Tests for the server group description entity and placement strategy types."""

import pytest
from ecsguard.domain.entities.server_group_description import (
    CreateServerGroupDescription,
    DeploymentMode,
    TargetGroupBinding,
    TargetGroupMapping,
    is_not_blank,
)
from ecsguard.domain.value_objects.placement_strategy_type import (
    BINPACK_FIELDS,
    PlacementStrategyType,
    SPREAD_FIELDS,
)


class TestIsNotBlank:
    @pytest.mark.parametrize("value", ["a", " tg "])
    def test_not_blank(self, value):
        assert is_not_blank(value)

    @pytest.mark.parametrize("value", [None, "", "   ", 5])
    def test_blank(self, value):
        assert not is_not_blank(value)


class TestDeploymentMode:
    def test_image_by_default(self):
        assert CreateServerGroupDescription().deployment_mode is DeploymentMode.IMAGE

    def test_artifact(self):
        description = CreateServerGroupDescription(use_task_definition_artifact=True)
        assert description.deployment_mode is DeploymentMode.ARTIFACT


class TestTargetGroupBinding:
    def test_none(self):
        assert CreateServerGroupDescription().target_group_binding is TargetGroupBinding.NONE

    def test_single(self):
        description = CreateServerGroupDescription(target_group="tg1")
        assert description.target_group_binding is TargetGroupBinding.SINGLE

    def test_blank_single_is_none(self):
        description = CreateServerGroupDescription(target_group="  ")
        assert description.target_group_binding is TargetGroupBinding.NONE

    def test_mappings(self):
        description = CreateServerGroupDescription(
            target_group_mappings=(TargetGroupMapping(target_group="tg1"),)
        )
        assert description.target_group_binding is TargetGroupBinding.MAPPINGS

    def test_conflict(self):
        description = CreateServerGroupDescription(
            target_group="tg1",
            target_group_mappings=(TargetGroupMapping(target_group="tg2"),),
        )
        assert description.target_group_binding is TargetGroupBinding.CONFLICT

    def test_whitespace_target_group_still_conflicts(self):
        description = CreateServerGroupDescription(
            target_group=" ",
            target_group_mappings=(TargetGroupMapping(target_group="tg2"),),
        )
        assert description.target_group_binding is TargetGroupBinding.CONFLICT
        assert not description.has_target_group

    def test_empty_mappings_are_ignored(self):
        description = CreateServerGroupDescription(target_group="tg1", target_group_mappings=())
        assert description.target_group_binding is TargetGroupBinding.SINGLE


class TestPlacementStrategyType:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("random", PlacementStrategyType.RANDOM),
            ("Spread", PlacementStrategyType.SPREAD),
            ("BINPACK", PlacementStrategyType.BINPACK),
        ],
    )
    def test_from_value(self, value, expected):
        assert PlacementStrategyType.from_value(value) is expected

    @pytest.mark.parametrize("value", [None, "", "  ", "scatter", 3])
    def test_from_value_rejects(self, value):
        with pytest.raises(ValueError):
            PlacementStrategyType.from_value(value)

    def test_allowed_fields(self):
        assert PlacementStrategyType.RANDOM.allowed_fields is None
        assert PlacementStrategyType.SPREAD.allowed_fields == SPREAD_FIELDS
        assert PlacementStrategyType.BINPACK.allowed_fields == BINPACK_FIELDS
        assert "instanceId" in SPREAD_FIELDS
        assert BINPACK_FIELDS == frozenset({"cpu", "memory"})
