"""layoutctl - Declarative directory layout provisioning and audit."""

__version__ = "0.1.0"
