"""Output printers, request builders and kubeconfig helpers for a Vultr cloud client."""

__version__ = "3.0.0"

__all__ = [
    "output",
    "catalog",
    "plans",
    "storage",
    "kubernetes",
    "nodepools",
    "payloads",
    "kubeconfig",
]