"""Helpers for Proxmox VE API data: config parsing, validation, size units and snapshots."""

__version__ = "0.1.0"
__all__ = ["util", "validate", "sizeunit", "snapshot"]