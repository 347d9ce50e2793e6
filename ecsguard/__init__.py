"""ecsguard: validation of ECS create-server-group deployment descriptions."""

__version__ = "0.1.0"
